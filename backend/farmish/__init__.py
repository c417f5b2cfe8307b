"""Farmish farm-management API."""
