"""Small shared helpers (logging setup, output path resolution)."""
