"""Detect Claude Code artifacts (CLAUDE.md, commands, MCP servers) in a project."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ccp.models.projects import ConfigLabel

logger = logging.getLogger(__name__)

_MCP_KEYS = ("mcpServers", "servers")


class ConfigLabelScanner:
    """LabelProvider for the files Claude Code reads from a project root."""

    def scan(self, path: Path) -> list[ConfigLabel]:
        labels: list[ConfigLabel] = []
        if _has_exact_file(path, "CLAUDE.md"):
            labels.append(ConfigLabel.claude_md())

        skills = count_commands(path / ".claude" / "commands")
        if skills > 0:
            labels.append(ConfigLabel.skills(skills))

        servers = count_mcp_servers(path / ".mcp.json")
        if servers:
            labels.append(ConfigLabel.mcp(servers))
        return labels


def count_commands(commands_dir: Path) -> int:
    """Number of regular files directly inside ``commands_dir``."""
    try:
        return sum(1 for entry in commands_dir.iterdir() if entry.is_file())
    except OSError:
        return 0


def count_mcp_servers(mcp_path: Path) -> int:
    """Number of configured servers in ``.mcp.json``; 0 when absent or malformed."""
    if not _is_file(mcp_path):
        return 0
    try:
        with open(mcp_path, encoding="utf-8") as file:
            payload = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.info("Ignoring unreadable %s: %s", mcp_path, exc)
        return 0
    if not isinstance(payload, dict):
        return 0
    for key in _MCP_KEYS:
        servers = payload.get(key)
        if isinstance(servers, dict | list):
            return len(servers)
    return 0


def _has_exact_file(directory: Path, name: str) -> bool:
    """Case-sensitive check, also on case-insensitive filesystems."""
    try:
        return any(entry.name == name and entry.is_file() for entry in directory.iterdir())
    except OSError:
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False
