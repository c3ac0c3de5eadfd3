"""Core layer: configuration, errors and result types."""
