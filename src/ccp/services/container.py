"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ccp.data.config_labels import ConfigLabelScanner
from ccp.data.docs import DocMatcher
from ccp.data.git_status import GitStatusReader
from ccp.data.scanner import ProjectScanner
from ccp.services.index import ProjectIndex
from ccp.services.launcher import Launcher

if TYPE_CHECKING:
    from ccp.config import Config


@dataclass
class PickerServices:
    """Holds the picker's collaborators. Built once at startup."""

    config: Config
    scanner: ProjectScanner
    doc_matcher: DocMatcher
    launcher: Launcher

    @classmethod
    def create(cls, config: Config) -> PickerServices:
        doc_matcher = DocMatcher(config.docs_dir)
        scanner = ProjectScanner(GitStatusReader(), ConfigLabelScanner(), doc_matcher)
        launcher = Launcher(doc_matcher, config.obsidian)
        return cls(config=config, scanner=scanner, doc_matcher=doc_matcher, launcher=launcher)

    def build_index(self) -> ProjectIndex:
        """Scan every root and build a fresh index."""
        self.doc_matcher.reload()
        records = self.scanner.scan(self.config.scan_roots, self.config.exclude)
        return ProjectIndex.build(records)
