from __future__ import annotations

from typing import Protocol


class QrCodePort(Protocol):
    def render_data_url(self, *, content: str) -> str:
        ...
