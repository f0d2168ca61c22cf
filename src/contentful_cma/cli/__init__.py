"""CLI (Typer + Rich) sobre `CMAClient`."""
