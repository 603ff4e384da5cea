"""File exporters for generated terrain."""
