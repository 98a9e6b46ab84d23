from __future__ import annotations

from typing import Protocol


class RevalidationPort(Protocol):
    def revalidate_paths(self, *, paths: list[str]) -> None:
        ...
