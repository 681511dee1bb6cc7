"""Infrastructure clients."""
