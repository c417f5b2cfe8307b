"""Request security helpers."""
