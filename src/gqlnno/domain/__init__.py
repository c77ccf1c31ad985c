"""Domain layer: validation shapes, compiler, and value validator.

This layer depends only on stdlib, pydantic, and graphql-core.
It must never import from services, plugins, commands, or config.
"""
