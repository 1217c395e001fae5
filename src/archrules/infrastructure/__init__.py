"""Infrastructure layer: model providers and configuration files."""
