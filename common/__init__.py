"""Shared helpers used by every part of the project."""
