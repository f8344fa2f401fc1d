"""Infrastructure layer - logging, singleton support and registries."""
