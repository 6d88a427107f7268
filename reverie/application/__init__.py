"""
Application layer - Use cases and repository ports.

Depends only on the domain layer. Storage adapters implement the protocols in
``reverie.application.interfaces``.
"""
