"""Shared helpers for object_finder."""
