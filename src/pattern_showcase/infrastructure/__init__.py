"""Infrastructure layer - logging and registries."""
