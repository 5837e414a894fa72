"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name*, optionally pre-bound.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger, e.g. ``circuit="hello"``.
    """
    # Stays a lazy proxy: configuration applied later still takes effect.
    return structlog.get_logger(name, **initial_values)


__all__ = ["get_logger"]
