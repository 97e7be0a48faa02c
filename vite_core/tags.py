from __future__ import annotations

from typing import Callable, List, Optional, Protocol

from .manifest import Chunk


# (url, chunk or None) -> complete HTML tag
TagCallback = Callable[[str, Optional[Chunk]], str]

STYLE_EXTENSIONS = (".css", ".scss", ".sass", ".less", ".styl", ".stylus")


class TagGenerator(Protocol):
    def make_script_tag(self, url: str, chunk: Chunk | None = None) -> str:
        ...

    def make_style_tag(self, url: str, chunk: Chunk | None = None) -> str:
        ...


def _integrity(chunk: Chunk | None) -> str:
    if chunk is not None and chunk.integrity:
        return f' integrity="{chunk.integrity}"'
    return ""


class DefaultTagGenerator:
    def make_script_tag(self, url: str, chunk: Chunk | None = None) -> str:
        return f'<script type="module" src="{url}"{_integrity(chunk)}></script>'

    def make_style_tag(self, url: str, chunk: Chunk | None = None) -> str:
        return f'<link rel="stylesheet" href="{url}"{_integrity(chunk)}>'


class CallbackTagGenerator:
    """Hands tag creation to host callbacks, per tag kind.

    A kind without a callback falls back to the default markup.
    """

    def __init__(
        self,
        make_script_tag: TagCallback | None = None,
        make_style_tag: TagCallback | None = None,
        fallback: TagGenerator | None = None,
    ) -> None:
        self._script = make_script_tag
        self._style = make_style_tag
        self._fallback = fallback or DefaultTagGenerator()

    def make_script_tag(self, url: str, chunk: Chunk | None = None) -> str:
        if self._script is not None:
            return self._script(url, chunk)
        return self._fallback.make_script_tag(url, chunk)

    def make_style_tag(self, url: str, chunk: Chunk | None = None) -> str:
        if self._style is not None:
            return self._style(url, chunk)
        return self._fallback.make_style_tag(url, chunk)


def make_tag_generator(
    make_script_tag: TagCallback | None = None,
    make_style_tag: TagCallback | None = None,
) -> TagGenerator:
    if make_script_tag is None and make_style_tag is None:
        return DefaultTagGenerator()
    return CallbackTagGenerator(make_script_tag, make_style_tag)


def render_chunk(chunk: Chunk, generator: TagGenerator, url_for: Callable[[str], str]) -> List[str]:
    """Main tag first, then one stylesheet per CSS dependency in manifest order."""
    if chunk.is_stylesheet:
        tags = [generator.make_style_tag(url_for(chunk.file), chunk)]
    else:
        tags = [generator.make_script_tag(url_for(chunk.file), chunk)]
    tags.extend(generator.make_style_tag(url_for(path)) for path in chunk.css)
    return tags


def is_style_path(path: str) -> bool:
    return path.endswith(STYLE_EXTENSIONS)
