"""Shared infrastructure services."""
