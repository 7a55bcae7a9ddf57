"""Configuration helper utilities."""
