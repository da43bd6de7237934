"""Infrastructure layer - transport and site-specific clients."""
