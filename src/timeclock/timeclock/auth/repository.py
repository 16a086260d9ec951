from __future__ import annotations

from typing import Protocol, Sequence


class PasswordRepository(Protocol):
    """Stored admin password hashes (werkzeug format)."""

    def list_hashes(self) -> Sequence[str]:
        raise NotImplementedError

    def add_hash(self, phc: str) -> int:
        raise NotImplementedError
