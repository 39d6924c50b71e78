# licenser:header:start
#
#   project      : Licenser
#   file         : policy.py
#   file_relpath : src/licenser/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""File exclusion policy.

Decides whether a document may be touched at all, based on its path (excluded
directory names and gitignore-style patterns matched with `pathspec`), its
extension, and its language id. The controller consults the policy before it
starts a debounce timer, so excluded documents never reach the state machine.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from licenser.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from licenser.config.logging import LicenserLogger
    from licenser.config.model import Config

logger: LicenserLogger = get_logger(__name__)


@dataclass(frozen=True)
class FilePolicy:
    """Immutable exclusion rules built from a `Config`.

    Attributes:
        extensions (frozenset[str]): Lower-case extensions with leading dot.
        dirs (frozenset[str]): Directory names excluded anywhere in the path.
        languages (frozenset[str]): Excluded language ids.
        spec (PathSpec | None): Compiled gitignore-style patterns, if any.
        root (Path | None): Base directory for relative pattern matching.
    """

    extensions: frozenset[str]
    dirs: frozenset[str]
    languages: frozenset[str]
    spec: PathSpec | None = None
    root: Path | None = None

    @classmethod
    def from_config(cls, config: Config, *, root: Path | None = None) -> FilePolicy:
        """Compile the exclusion rules of ``config``."""
        spec: PathSpec | None = None
        if config.exclude_patterns:
            spec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))
        return cls(
            extensions=frozenset(config.exclude_extensions),
            dirs=frozenset(config.exclude_dirs),
            languages=frozenset(lang.lower() for lang in config.exclude_languages),
            spec=spec,
            root=root,
        )

    def excludes_language(self, language_id: str) -> bool:
        """Return True if documents in ``language_id`` are never processed."""
        return language_id.lower() in self.languages

    def excludes_path(
        self,
        path: Path | PurePath,
        *,
        base: Path | PurePath | None = None,
    ) -> bool:
        """Return True if ``path`` is excluded by extension, directory or pattern.

        Directory names and patterns are matched against the path relative to
        ``base`` (or to `root`), so the location of the project itself never
        excludes it. An absolute path outside both is checked by extension and
        pattern only.
        """
        if path.suffix.lower() in self.extensions:
            logger.trace("Excluded by extension: %s", path)
            return True

        rel: PurePath | None = self._relative(path, base)
        if rel is not None and any(part in self.dirs for part in rel.parts[:-1]):
            logger.trace("Excluded by directory: %s", path)
            return True

        match_path: str = (rel if rel is not None else PurePath(path)).as_posix()
        if self.spec is not None and self.spec.match_file(match_path):
            logger.trace("Excluded by pattern: %s", path)
            return True

        return False

    def excludes(
        self,
        path: Path | PurePath | None,
        language_id: str,
        *,
        base: Path | PurePath | None = None,
    ) -> bool:
        """Return True if a document must be left alone.

        Untitled documents (no path) are judged by language only.
        """
        if self.excludes_language(language_id):
            logger.trace("Excluded by language: %s", language_id)
            return True
        return path is not None and self.excludes_path(path, base=base)

    def _relative(
        self,
        path: Path | PurePath,
        base: Path | PurePath | None,
    ) -> PurePath | None:
        """Return ``path`` relative to ``base`` or `root`, or None if outside both."""
        for anchor in (base, self.root):
            if anchor is None:
                continue
            try:
                return PurePath(path).relative_to(anchor)
            except ValueError:
                continue
        return None if PurePath(path).is_absolute() else PurePath(path)
