"""Infrastructure layer — database, repositories, templates, site wiring.

Repositories implement the read ports declared in
:mod:`contentmenu.domain.ports` and hand back domain models.
This layer must never import from services, commands, or output.
"""
