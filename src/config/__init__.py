"""Static configuration tables and constants."""
