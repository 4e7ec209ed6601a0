"""Domain layer: constants, role rules, version ordering, and host ports.

This layer depends only on the stdlib.
It must never import from services, plugins, infrastructure, commands, or config.
"""
