"""Presentation layer: rule DSL and pytest plugin."""
