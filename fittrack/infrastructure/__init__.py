"""Infrastructure layer: configuration, logging, cache and catalog adapter."""
