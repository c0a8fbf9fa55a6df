"""Infrastructure layer - randomness, configuration files and preview."""
