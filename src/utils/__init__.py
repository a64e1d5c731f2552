"""Shared logging, error handling, environment and timing helpers."""
