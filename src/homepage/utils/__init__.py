"""Shared helpers for logging and error handling."""
