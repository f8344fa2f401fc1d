"""Core domain concepts shared across bounded contexts."""
