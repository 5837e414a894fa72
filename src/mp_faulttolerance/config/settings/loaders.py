"""Config settings – environment and ``.env`` loaders.

Durations are written in seconds by default; fields whose name ends in
``_seconds`` also accept a unit suffix, so ``FAULT_TOLERANCE_RETRY_DELAY_SECONDS=200ms``
and ``...=0.2`` load the same value.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import re
from typing import Any, Mapping, TypeVar

from dotenv import load_dotenv

from mp_faulttolerance.config.settings.base import Settings
from mp_faulttolerance.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

S = TypeVar("S", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})
_DURATION = re.compile(r"^\s*(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>ms|s|m)?\s*$")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, None: 1.0}


def parse_duration(raw: str) -> float:
    """``"200ms"`` -> 0.2, ``"2s"`` / ``"2"`` -> 2.0, ``"1m"`` -> 60.0."""
    match = _DURATION.match(raw)
    if match is None:
        raise ValueError(f"not a duration: {raw!r}")
    return float(match["amount"]) * _UNIT_SECONDS[match["unit"]]


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


class SettingsLoader(abc.ABC):
    """Port: build a settings dataclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables into a settings dataclass.

    *prefix* overrides the class's ``_prefix``, e.g. ``FAULT_TOLERANCE_HELLO``
    for per-operation overrides. *environ* defaults to ``os.environ``.
    """

    def __init__(self, prefix: str | None = None, environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._environ = environ

    def load(self, settings_class: type[S]) -> S:
        environ = os.environ if self._environ is None else self._environ
        prefix = (self._prefix if self._prefix is not None else settings_class._prefix).upper()
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = f"{prefix}_{field.name.upper()}" if prefix else field.name.upper()
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            try:
                values[field.name] = self._convert(field.name, field.type, raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _convert(name: str, annotation: Any, raw: str) -> Any:
        kind = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
        if kind == "bool":
            return _parse_bool(raw)
        if kind == "int":
            return int(raw)
        if kind == "float":
            return parse_duration(raw) if name.endswith("_seconds") else float(raw)
        return raw


class DotenvSettingsLoader(SettingsLoader):
    """Populate ``os.environ`` from a ``.env`` file, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False, prefix: str | None = None) -> None:
        self._env_file = env_file
        self._override = override
        self._prefix = prefix

    def load(self, settings_class: type[S]) -> S:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader(self._prefix).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "parse_duration"]
