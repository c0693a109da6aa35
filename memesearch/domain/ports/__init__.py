"""Ports - interfaces and config models."""
