"""Configuration management for labutils using TOML files + kwargs overrides."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from labutils.core.errors import InvalidArgumentError
from labutils.spacing.parameter import ParameterSpace

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import,no-redef]


@dataclass
class SpacingConfig:
    num: int = 50
    base: float = 10.0
    endpoint: bool = True


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class LabConfig:
    spacing: SpacingConfig = field(default_factory=SpacingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sweep: dict[str, dict] = field(default_factory=dict)

    @staticmethod
    def defaults() -> LabConfig:
        return LabConfig()

    @staticmethod
    def load(path: str | Path) -> LabConfig:
        """Load config from a TOML file. Missing file returns defaults."""
        cfg = LabConfig()
        p = Path(path)
        if not p.exists():
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> LabConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation mapped to flat names:
          spacing.num=10
          spacing.endpoint=false
          logging.level=DEBUG
        """
        cfg = LabConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg

    def param_spaces(self) -> list[ParameterSpace]:
        """Build the parameter spaces declared under ``[sweep]``.

        Each entry is a table with a ``kind`` of ``logspace``, ``geomspace``
        or ``choices``. ``num``, ``base`` and ``endpoint`` fall back to the
        ``[spacing]`` defaults.
        """
        spaces: list[ParameterSpace] = []
        for name, entry in self.sweep.items():
            kind = entry.get("kind", "choices")
            if kind == "choices":
                if "options" not in entry:
                    raise InvalidArgumentError(f"sweep.{name}: 'options' is required")
                spaces.append(ParameterSpace.choices(name, entry["options"]))
                continue

            missing = [k for k in ("start", "stop") if k not in entry]
            if missing:
                raise InvalidArgumentError(f"sweep.{name}: missing {', '.join(missing)}")
            num = int(entry.get("num", self.spacing.num))
            endpoint = _to_bool(entry.get("endpoint", self.spacing.endpoint))
            if kind == "logspace":
                spaces.append(ParameterSpace.logspace(
                    name, entry["start"], entry["stop"], num,
                    base=entry.get("base", self.spacing.base), endpoint=endpoint,
                ))
            elif kind == "geomspace":
                spaces.append(ParameterSpace.geomspace(
                    name, entry["start"], entry["stop"], num, endpoint=endpoint,
                ))
            else:
                raise InvalidArgumentError(f"sweep.{name}: unknown kind {kind!r}")
        return spaces


def _apply_toml(cfg: LabConfig, data: dict) -> None:
    if "spacing" in data:
        s = data["spacing"]
        if "num" in s:
            cfg.spacing.num = int(s["num"])
        if "base" in s:
            cfg.spacing.base = float(s["base"])
        if "endpoint" in s:
            cfg.spacing.endpoint = _to_bool(s["endpoint"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])

    if "sweep" in data:
        cfg.sweep = {name: dict(entry) for name, entry in data["sweep"].items()}


def _to_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _apply_overrides(cfg: LabConfig, overrides: dict[str, object]) -> None:
    mapping: dict[str, tuple[object, str]] = {
        "spacing.num": (cfg.spacing, "num"),
        "spacing.base": (cfg.spacing, "base"),
        "spacing.endpoint": (cfg.spacing, "endpoint"),
        "logging.level": (cfg.logging, "level"),
    }

    for key, value in overrides.items():
        if key in mapping:
            obj, attr = mapping[key]
            # Coerce to the same type as the default (bool before int)
            current = getattr(obj, attr)
            if isinstance(current, bool):
                value = _to_bool(value)
            elif isinstance(current, float):
                value = float(value)  # type: ignore[arg-type]
            elif isinstance(current, int):
                value = int(value)  # type: ignore[arg-type]
            else:
                value = str(value)
            setattr(obj, attr, value)
