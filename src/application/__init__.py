"""Application layer - use cases over the student domain."""
