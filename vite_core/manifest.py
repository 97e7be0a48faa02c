from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ManifestNotFound, NoSuchEntrypoint


logger = logging.getLogger("vite_core.manifest")


class Chunk(BaseModel):
    """One record of the Vite manifest (entry or shared chunk)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file: str = ""
    src: Optional[str] = None
    is_entry: bool = Field(False, alias="isEntry")
    is_dynamic_entry: bool = Field(False, alias="isDynamicEntry")
    css: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()
    dynamic_imports: Tuple[str, ...] = Field((), alias="dynamicImports")
    assets: Tuple[str, ...] = ()
    integrity: Optional[str] = None

    @field_validator("file", mode="before")
    @classmethod
    def _file_default(cls, value) -> str:
        return "" if value is None else value

    @field_validator("is_entry", "is_dynamic_entry", mode="before")
    @classmethod
    def _flag_default(cls, value) -> bool:
        return False if value is None else value

    @field_validator("css", "imports", "dynamic_imports", "assets", mode="before")
    @classmethod
    def _list_default(cls, value) -> Tuple[str, ...]:
        return tuple(value or ())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Chunk":
        return cls.model_validate(dict(data))

    @property
    def is_stylesheet(self) -> bool:
        return self.file.endswith(".css")


class Manifest:
    """Parsed manifest: every chunk keyed by its manifest key, in file order."""

    def __init__(self, path: Path, chunks: Dict[str, Chunk]) -> None:
        self.path = Path(path)
        self._chunks = chunks
        self._entries = [chunk for chunk in chunks.values() if chunk.is_entry]

    @classmethod
    def read(cls, path) -> "Manifest":
        path = Path(path)
        if not path.exists():
            raise ManifestNotFound(path, guess_config_name(path))
        raw = json.loads(path.read_text(encoding="utf-8"))
        chunks = {str(key): Chunk.from_dict(value or {}) for key, value in raw.items()}
        manifest = cls(path, chunks)
        logger.debug(
            "Read manifest with %d chunks (%d entries)",
            len(chunks),
            len(manifest._entries),
            extra={"path": path},
        )
        return manifest

    def get_entry(self, name: str) -> Chunk:
        # Substring match lets callers omit extensions; the first entry in
        # manifest order wins when several sources contain the name.
        for entry in self._entries:
            if entry.src and name in entry.src:
                return entry
        raise NoSuchEntrypoint.in_manifest(name, guess_config_name(self.path))

    def get_entries(self) -> List[Chunk]:
        return list(self._entries)

    def get_chunks(self) -> Dict[str, Chunk]:
        return dict(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)


def guess_config_name(path) -> str:
    return Path(path).parent.name


def read(path) -> Manifest:
    return Manifest.read(path)


def resolve(manifest: Manifest, name: str) -> Chunk:
    return manifest.get_entry(name)
