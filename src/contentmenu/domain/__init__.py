"""Domain layer — menu and content value objects, geometry, ports.

This layer depends only on stdlib, pydantic, and markupsafe.
It must never import from render, services, infrastructure, commands, or config.
"""
