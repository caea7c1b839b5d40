"""Shared helpers: error types, Unicode constants and logging."""
