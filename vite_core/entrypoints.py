from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Protocol, Union


logger = logging.getLogger("vite_core.entrypoints")

PathsLike = Union[str, Iterable[str]]


class EntrypointsFinder(Protocol):
    def find(self, paths: PathsLike, ignore: PathsLike) -> List[Path]:
        ...


def _as_list(value: PathsLike | None) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class FilesystemEntrypointsFinder:
    """Discovers development entrypoints on disk.

    Each configured path is a file or a directory relative to ``base_path``.
    Directories are walked recursively. A file is dropped when its POSIX path,
    relative to ``base_path``, matches any of the ``ignore`` regular expressions.
    """

    def __init__(self, base_path: Path) -> None:
        self.base_path = Path(base_path)

    def _candidates(self, path: Path) -> List[Path]:
        if path.is_file():
            return [path]
        if path.is_dir():
            return sorted(p for p in path.rglob("*") if p.is_file())
        logger.debug("Entrypoint path does not exist: %s", path, extra={"path": path})
        return []

    def _display(self, path: Path) -> str:
        """POSIX path relative to base_path, the form ignore patterns see."""
        try:
            return path.relative_to(self.base_path).as_posix()
        except ValueError:
            return path.as_posix()

    def find(self, paths: PathsLike, ignore: PathsLike) -> List[Path]:
        patterns = [re.compile(p) for p in _as_list(ignore)]
        found: List[Path] = []
        seen: set[Path] = set()
        for raw in _as_list(paths):
            for candidate in self._candidates(self.base_path / raw):
                if any(p.search(self._display(candidate)) for p in patterns):
                    continue
                if candidate in seen:
                    continue
                seen.add(candidate)
                found.append(candidate)
        return found
