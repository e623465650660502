"""Domain layer — instants, layouts, durations, storage values.

This layer depends only on stdlib and pydantic.
It must never import from converters, infrastructure, or config.
"""
