"""Gift resource service."""
