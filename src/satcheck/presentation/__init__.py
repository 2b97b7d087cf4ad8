"""Presentation layer: pytest integration."""
