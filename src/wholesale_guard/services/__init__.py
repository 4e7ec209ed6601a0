"""Service layer: checkout and compatibility logic returning ServiceResult.

Services may import from domain.
They must never import from commands, output, or plugins.
"""
