"""Runtime services shared by the engine and its adapters."""
