"""Infrastructure layer - Adapters implementing application ports."""
