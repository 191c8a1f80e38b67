"""Command implementations for Pomobar CLI."""
