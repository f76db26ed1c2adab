"""Execute intents: resume Claude, reveal in the file manager, open notes."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from urllib.parse import quote

from result import Err, Ok, Result

from ccp.config import ObsidianConfig
from ccp.data.protocols import DocFinder
from ccp.models.selection import Intent, Open, OpenDoc, RevealInFinder

logger = logging.getLogger(__name__)


def obsidian_uri(obsidian: ObsidianConfig, doc_path: Path) -> str:
    """``obsidian://open`` URI for a note, addressed by vault and prefixed stem."""
    vault = quote(obsidian.vault, safe="")
    file = quote(f"{obsidian.file_prefix}{doc_path.stem}", safe="")
    return f"obsidian://open?vault={vault}&file={file}"


def _opener() -> str:
    return "open" if sys.platform == "darwin" else "xdg-open"


class Launcher:
    """Runs the external programs behind each intent.

    Failures come back as ``Err`` so the caller can show them without
    touching selection state.
    """

    def __init__(
        self,
        doc_finder: DocFinder | None = None,
        obsidian: ObsidianConfig | None = None,
        claude: str = "claude",
    ) -> None:
        self._docs = doc_finder
        self._obsidian = obsidian
        self._claude = claude

    def launch(self, intent: Intent) -> Result[str, str]:
        if isinstance(intent, Open):
            return self.open_project(intent.path)
        if isinstance(intent, RevealInFinder):
            return self.reveal(intent.path)
        if isinstance(intent, OpenDoc):
            return self.open_doc(intent.name)
        return Err(f"Nothing to launch for {intent.kind}")

    def open_project(self, path: Path) -> Result[str, str]:
        """Run ``claude --continue`` in ``path`` and wait for it to exit."""
        if not path.is_dir():
            return Err(f"Project directory is gone: {path}")
        executable = shutil.which(self._claude)
        if executable is None:
            return Err(f"{self._claude} not found on PATH")
        try:
            proc = subprocess.run([executable, "--continue"], cwd=path)
        except OSError as exc:
            logger.warning("Failed to launch claude in %s: %s", path, exc)
            return Err(f"Failed to launch claude: {exc}")
        if proc.returncode != 0:
            return Err(f"Claude exited with status {proc.returncode}")
        return Ok(f"Returned from {path.name}")

    def reveal(self, path: Path) -> Result[str, str]:
        if not path.exists():
            return Err(f"Path does not exist: {path}")
        return self._spawn([_opener(), str(path)], f"Revealed {path.name}")

    def open_doc(self, name: str) -> Result[str, str]:
        if self._docs is None or self._obsidian is None:
            return Err("No docs folder configured")
        doc_path = self._docs.match(name)
        if doc_path is None:
            return Err(f"No doc found for {name}")
        uri = obsidian_uri(self._obsidian, doc_path)
        return self._spawn([_opener(), uri], f"Opened {doc_path.name}")

    def _spawn(self, args: list[str], message: str) -> Result[str, str]:
        try:
            subprocess.Popen(
                args,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.warning("Failed to run %s: %s", args[0], exc)
            return Err(f"Failed to run {args[0]}: {exc}")
        return Ok(message)
