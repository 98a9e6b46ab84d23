from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from app.application.ports.revalidation_port import RevalidationPort


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevalidationClientSettings:
    revalidate_url: str
    revalidate_secret: str
    timeout_seconds: float


class HttpRevalidationClient(RevalidationPort):
    """Avisa o frontend para invalidar o cache das paginas alteradas.

    Melhor esforco: uma falha aqui nunca desfaz nem interrompe a escrita.
    """

    def __init__(
        self,
        settings: RevalidationClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def revalidate_paths(self, *, paths: list[str]) -> None:
        if not paths:
            return
        if not self._settings.revalidate_url:
            logger.debug("revalidation_client: skipped reason=no_url paths=%s", paths)
            return

        headers = {}
        if self._settings.revalidate_secret:
            headers["x-revalidate-secret"] = self._settings.revalidate_secret

        try:
            with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
                response = client.post(
                    self._settings.revalidate_url,
                    json={"paths": paths},
                    headers=headers,
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(
                "revalidation_client: revalidate_failed paths=%s error=%s",
                paths,
                exc,
            )
            return

        logger.info("revalidation_client: revalidated paths=%s", paths)
