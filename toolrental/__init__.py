"""Tool rental service: rent lifecycle, scheduling and payment capture."""
