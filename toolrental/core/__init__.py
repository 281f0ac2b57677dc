"""Core infrastructure for the tool rental service."""
