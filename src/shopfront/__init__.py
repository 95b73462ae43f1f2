"""Shopfront - storefront admin backend.

Layers:
    domain/          # Users, superusers, orders/products, report aggregation
    application/     # Services, commands and queries orchestrating the domain
    infrastructure/  # SQLAlchemy persistence, Excel export
    presentation/    # FastAPI application and Typer CLI
"""
