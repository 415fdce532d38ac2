"""Presentation layer: integration with test engines."""
