"""Command line interface for running the demos."""
