"""Command-line interface for inspecting the UI component library."""
