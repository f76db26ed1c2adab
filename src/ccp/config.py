"""Configuration for ccp."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
from result import Err, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_SCAN_DIRS = ("Documents/app", "Documents/playground")
DEFAULT_EXCLUDE = frozenset({"claude-tui"})
DEFAULT_DOCS_PATH = "Library/Mobile Documents/iCloud~md~obsidian/Documents/NV/Personal/App"


def default_config_path() -> Path:
    return Path.home() / ".config" / "ccp" / "config.toml"


@dataclass(frozen=True)
class ObsidianConfig:
    """Where project notes live and how to address them in Obsidian."""

    docs_path: str = DEFAULT_DOCS_PATH
    vault: str = "NV"
    file_prefix: str = "Personal/App/"


@dataclass(frozen=True)
class ScanRoot:
    """A resolved scan directory and the group label its projects get."""

    path: Path
    group: str


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    home: Path = field(default_factory=Path.home)
    scan_dirs: tuple[str, ...] = DEFAULT_SCAN_DIRS
    exclude: frozenset[str] = DEFAULT_EXCLUDE
    obsidian: ObsidianConfig | None = field(default_factory=ObsidianConfig)

    @property
    def scan_roots(self) -> list[ScanRoot]:
        return [
            ScanRoot(path=self._resolve(rel), group=Path(rel.rstrip("/")).name or rel)
            for rel in self.scan_dirs
        ]

    @property
    def docs_dir(self) -> Path | None:
        if self.obsidian is None:
            return None
        return self._resolve(self.obsidian.docs_path)

    def _resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        if path.is_absolute():
            return path
        return self.home / path


class _ObsidianSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    docs_path: str = DEFAULT_DOCS_PATH
    vault: str = "NV"
    file_prefix: str = "Personal/App/"


class ConfigFile(BaseModel):
    """Schema of ``config.toml``."""

    model_config = ConfigDict(extra="forbid")

    scan_dirs: list[str] = list(DEFAULT_SCAN_DIRS)
    exclude: list[str] = sorted(DEFAULT_EXCLUDE)
    obsidian: _ObsidianSection | None = _ObsidianSection()

    def to_config(self, home: Path) -> Config:
        obsidian = None
        if self.obsidian is not None and self.obsidian.docs_path:
            obsidian = ObsidianConfig(
                docs_path=self.obsidian.docs_path,
                vault=self.obsidian.vault,
                file_prefix=self.obsidian.file_prefix,
            )
        return Config(
            home=home,
            scan_dirs=tuple(self.scan_dirs),
            exclude=frozenset(self.exclude),
            obsidian=obsidian,
        )


def load_config(path: Path | None = None, home: Path | None = None) -> Result[Config, str]:
    """Load ``config.toml``; a missing file yields the default configuration."""
    path = path or default_config_path()
    home = home or Path.home()
    if not path.is_file():
        logger.debug("No config file at %s, using defaults", path)
        return Ok(Config(home=home))
    try:
        with open(path, "rb") as file:
            raw = tomllib.load(file)
    except OSError as exc:
        return Err(f"Cannot read {path}: {exc}")
    except tomllib.TOMLDecodeError as exc:
        return Err(f"Invalid TOML in {path}: {exc}")

    try:
        parsed = ConfigFile.model_validate(raw)
    except ValidationError as exc:
        return Err(f"Invalid config {path}: {exc}")
    return Ok(parsed.to_config(home))
