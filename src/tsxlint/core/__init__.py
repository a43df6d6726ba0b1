"""Core engine, checkers, parser adapter and configuration for tsx-text-lint."""
