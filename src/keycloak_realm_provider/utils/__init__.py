"""Utility modules for the realm provider."""
