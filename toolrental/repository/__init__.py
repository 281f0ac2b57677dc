"""Data access helpers for the tool rental service."""
