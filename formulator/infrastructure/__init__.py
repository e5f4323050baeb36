"""Infrastructure layer: configuration and catalog adapters."""
