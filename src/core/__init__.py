"""Core models, configuration, linting, and logging shared by all layers."""
