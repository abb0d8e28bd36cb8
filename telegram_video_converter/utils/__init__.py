"""Small helpers shared by the CLI."""
