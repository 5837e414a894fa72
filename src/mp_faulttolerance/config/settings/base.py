"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_faulttolerance.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare ``_prefix`` (the environment variable namespace) and
    may override :meth:`_validate` for range checks.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @staticmethod
    def _require(name: str, value: object, ok: bool, reason: str) -> None:
        if not ok:
            raise InvalidSettingValueError(name, value, reason)


__all__ = ["Settings"]
