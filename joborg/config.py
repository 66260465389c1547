"""Configuration loading for joborg (.joborg.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import REPORT_FILENAME

CONFIG_FILENAME = ".joborg.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class JobOrgConfig:
    """Resolved locations and logging settings for a pipeline run."""

    root: Path
    source_dir: Path
    destination_dir: Path
    db_path: Path
    report_path: Path
    log_file: Optional[Path] = None
    verbose: bool = False

    @classmethod
    def defaults(cls, root: Path) -> "JobOrgConfig":
        return cls(
            root=root,
            source_dir=root / "works",
            destination_dir=root / "organized",
            db_path=root / ".joborg" / "works.json",
            report_path=root / REPORT_FILENAME,
        )

    def with_overrides(
        self,
        *,
        src: str | None = None,
        dest: str | None = None,
        db: str | None = None,
    ) -> "JobOrgConfig":
        """Return a copy with command-line paths applied on top."""
        return JobOrgConfig(
            root=self.root,
            source_dir=_resolve_cli_path(src) if src else self.source_dir,
            destination_dir=_resolve_cli_path(dest) if dest else self.destination_dir,
            db_path=_resolve_cli_path(db) if db else self.db_path,
            report_path=self.report_path,
            log_file=self.log_file,
            verbose=self.verbose,
        )


def load_config(config_path: Path) -> JobOrgConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = JobOrgConfig.defaults(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    paths = _as_dict(data.get("paths"))
    source = _as_str(paths.get("source"))
    destination = _as_str(paths.get("destination"))
    store = _as_str(paths.get("store"))
    report = _as_str(paths.get("report"))
    if source:
        config.source_dir = _resolve_path(root, source)
    if destination:
        config.destination_dir = _resolve_path(root, destination)
    if store:
        config.db_path = _resolve_path(root, store)
    if report:
        config.report_path = _resolve_path(root, report)

    logging_data = _as_dict(data.get("logging"))
    log_file = _as_str(logging_data.get("file"))
    if log_file:
        config.log_file = _resolve_path(root, log_file)
    config.verbose = _as_bool(logging_data.get("verbose")) or False

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(os.path.expanduser(value))
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def _resolve_cli_path(value: str) -> Path:
    return Path(value).expanduser().resolve()


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "JobOrgConfig", "load_config"]
