"""Top-level tsxlint commands (one module per command)."""
