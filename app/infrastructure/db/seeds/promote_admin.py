from __future__ import annotations

import logging

from sqlalchemy import text


logger = logging.getLogger(__name__)


def promote_admin(engine, *, email: str) -> bool:
    """Marca o usuario do e-mail informado como ADMIN. Retorna False se nao existir."""
    with engine.begin() as conn:
        row = conn.execute(
            text(
                """
                UPDATE public.users
                SET role = 'ADMIN',
                    updated_at = now()
                WHERE lower(email) = :email
                RETURNING id
                """
            ),
            {"email": email.strip().lower()},
        ).first()

    if row is None:
        logger.warning("promote_admin: user_not_found email=%s", email)
        return False
    logger.info("promote_admin: promoted user_id=%s", row[0])
    return True


if __name__ == "__main__":
    import argparse

    from app.infrastructure.db.engine import get_engine
    from app.shared.config import get_settings

    parser = argparse.ArgumentParser(description="Promote a user to ADMIN by e-mail.")
    parser.add_argument("email")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")
    if not promote_admin(get_engine(settings.postgres_dsn), email=args.email):
        raise SystemExit(1)
