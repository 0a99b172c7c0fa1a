"""Helpers for finding processes by name and signalling them."""
