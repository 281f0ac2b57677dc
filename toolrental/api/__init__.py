"""HTTP API of the tool rental service."""
