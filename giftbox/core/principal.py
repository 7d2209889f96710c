"""Identity of the caller, used to stamp createdBy/modifiedBy."""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from .config import get_settings

PRINCIPAL_HEADER = "X-Principal"

_principal: ContextVar[str | None] = ContextVar("gift_principal", default=None)


def current_principal() -> str:
    """Return the principal bound to the current context, or the configured default."""
    value = (_principal.get() or "").strip()
    return value or get_settings().default_principal


@contextmanager
def principal_scope(name: str | None) -> Iterator[str]:
    """Bind ``name`` as the current principal for the duration of the block."""
    token = _principal.set((name or "").strip() or None)
    try:
        yield current_principal()
    finally:
        _principal.reset(token)
