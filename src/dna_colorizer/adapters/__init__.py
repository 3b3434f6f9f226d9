"""Host adapters for the colorizer engine."""
