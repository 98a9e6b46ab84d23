from __future__ import annotations

from uuid import UUID


def parse_uuid(value: str | None) -> str | None:
    """Normaliza um id vindo da URL; ``None`` quando nao e um UUID valido.

    As colunas ``id`` sao ``uuid`` no Postgres: um valor malformado faria a
    consulta falhar em vez de simplesmente nao encontrar nada.
    """
    if not value:
        return None
    try:
        return str(UUID(str(value)))
    except ValueError:
        return None
