"""Schema management for relational providers of any bounded context.

Memory providers need no schema, so both functions skip them. Used by
src/manage.py.
"""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

_RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def _relational_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
            yield name, provider


def _register_models(domain: Domain, provider_name: str) -> None:
    # Touching _dao builds the SQLAlchemy model and registers it on the
    # provider's metadata.
    records = [
        *domain.registry.aggregates.values(),
        *domain.registry.entities.values(),
    ]
    for record in records:
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every relational provider of the domain."""
    with domain.domain_context():
        for name, provider in _relational_providers(domain):
            _register_models(domain, name)
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.create_all(engine)
            logger.info("Schema created", domain=domain.name, provider=name)


def drop_db(domain: Domain) -> None:
    """Drop tables for every relational provider of the domain."""
    with domain.domain_context():
        for name, provider in _relational_providers(domain):
            _register_models(domain, name)
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            logger.info("Schema dropped", domain=domain.name, provider=name)
