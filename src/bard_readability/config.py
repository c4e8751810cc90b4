from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for a corpus scoring run."""

    file_suffix: str = ".txt"
    encoding: str = "utf-8"
    skip_invalid: bool = True
    show_timing: bool = False

    def __post_init__(self) -> None:
        # "txt" and ".txt" select the same files.
        if not self.file_suffix.startswith("."):
            self.file_suffix = f".{self.file_suffix}"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from known keys of ``data``; others are ignored."""
    known = {field.name for field in fields(ReadabilityConfig)}
    return ReadabilityConfig(
        **{key: value for key, value in (data or {}).items() if key in known}
    )


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is not None and not isinstance(parsed, Mapping):
        raise ValueError(f"{path}: configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Return the YAML configuration at ``path``, or the defaults when omitted."""
    return ReadabilityConfig() if path is None else config_from_yaml(path)
