"""Schema management for SQL-backed providers.

The memory provider keeps no schema, so only ``sqlite`` and ``postgresql``
providers are touched.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

from shops.shop.shop import Shop

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for provider in domain.providers.values():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider, create_engine(provider.conn_info["database_uri"])


def setup_db(domain: Domain) -> None:
    """Create the shops table on every SQL provider."""
    with domain.domain_context():
        for provider, engine in _sql_providers(domain):
            # Accessing _dao builds the SQLAlchemy model into provider metadata
            domain.repository_for(Shop)._dao  # noqa: B018
            provider._metadata.create_all(engine)


def drop_db(domain: Domain) -> None:
    """Drop the shops table on every SQL provider."""
    with domain.domain_context():
        for provider, engine in _sql_providers(domain):
            provider._metadata.drop_all(engine)
