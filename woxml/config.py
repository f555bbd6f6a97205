from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars
from .domain.entities.output import OutputMode


@dataclass(frozen=True, slots=True)
class WriterConfig:
    mode: OutputMode = OutputMode.COMPACT
    verbosity: int = Defaults.VERBOSITY

    def __post_init__(self) -> None:
        if not isinstance(self.mode, OutputMode):
            raise ValueError(f"mode must be an OutputMode, got {self.mode!r}")
        if isinstance(self.verbosity, bool) or self.verbosity < 0:
            raise ValueError(
                f"verbosity must be a non-negative int, got {self.verbosity!r}"
            )

    @classmethod
    def from_env(cls) -> WriterConfig:
        return cls(
            mode=OutputMode.parse(os.getenv(EnvVars.MODE, Defaults.MODE)),
            verbosity=int(os.getenv(EnvVars.VERBOSITY, str(Defaults.VERBOSITY))),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        writer_section = _get_table(data, "writer")
        logging_section = _get_table(data, "logging")
        mode = base_config.mode
        if (value := writer_section.get("mode")) is not None:
            mode = OutputMode.parse(str(value))
        verbosity = base_config.verbosity
        if (value := logging_section.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="logging.verbosity")
        return WriterConfig(mode=mode, verbosity=verbosity)


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
