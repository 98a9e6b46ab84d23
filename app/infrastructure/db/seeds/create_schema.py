from __future__ import annotations

import logging

from app.infrastructure.db.engine import Base
from app.infrastructure.db.models import accounts  # noqa: F401  registra as tabelas no metadata


logger = logging.getLogger(__name__)


def create_schema(engine) -> list[str]:
    """Cria as tabelas que ainda nao existem. Nao altera tabelas existentes."""
    Base.metadata.create_all(engine)
    tables = sorted(Base.metadata.tables)
    logger.info("create_schema: ensured tables=%s", tables)
    return tables


if __name__ == "__main__":
    from app.infrastructure.db.engine import get_engine
    from app.shared.config import get_settings

    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")
    create_schema(get_engine(settings.postgres_dsn))
