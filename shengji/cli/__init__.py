"""Command-line interface for inspecting play shapes."""
