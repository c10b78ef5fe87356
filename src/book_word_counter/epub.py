from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
import zipfile
from html.parser import HTMLParser
from pathlib import Path, PurePosixPath
from typing import Iterator

from .errors import DocumentReadError

LOGGER = logging.getLogger(__name__)

TEXT_MEMBER_SUFFIXES = {".xhtml", ".html", ".htm", ".txt"}
TEXT_MEDIA_PREFIXES = ("application/xhtml", "text/html", "text/plain")


class EPUBParseError(DocumentReadError):
    """Raised when an EPUB archive cannot be parsed."""


def iter_epub_lines(epub_path: Path) -> Iterator[str]:
    """
    Yield the text lines of an EPUB, one chapter at a time.

    Chapters follow the OPF spine. When the spine lists nothing readable,
    every HTML/XHTML/TXT member of the archive is used in archive order.
    """
    if not epub_path.exists():
        raise EPUBParseError(f"EPUB file not found: {epub_path}", epub_path)

    try:
        with zipfile.ZipFile(epub_path, "r") as zf:
            opf_path = _locate_opf(zf, epub_path)
            members = _spine_members(zf, opf_path) or _fallback_members(zf)
            LOGGER.debug("Reading %d chapters from %s", len(members), epub_path)
            for member in members:
                try:
                    raw_html = zf.read(member).decode("utf-8", errors="replace")
                except KeyError:
                    LOGGER.warning("Spine entry %s missing from %s", member, epub_path)
                    continue
                yield from _html_lines(raw_html)
    except zipfile.BadZipFile as exc:
        raise EPUBParseError(f"Invalid EPUB archive: {epub_path}", epub_path) from exc


def _locate_opf(zf: zipfile.ZipFile, epub_path: Path) -> str:
    try:
        root = ET.fromstring(zf.read("META-INF/container.xml"))
    except KeyError as exc:
        raise EPUBParseError(
            f"EPUB missing META-INF/container.xml: {epub_path}", epub_path
        ) from exc
    except ET.ParseError as exc:
        raise EPUBParseError(
            f"Unable to parse container.xml: {epub_path}", epub_path
        ) from exc
    rootfile = root.find(".//{*}rootfile")
    opf_path = rootfile.attrib.get("full-path") if rootfile is not None else None
    if not opf_path:
        raise EPUBParseError(
            f"container.xml does not name a package document: {epub_path}", epub_path
        )
    return opf_path


def _spine_members(zf: zipfile.ZipFile, opf_path: str) -> list[str]:
    try:
        root = ET.fromstring(zf.read(opf_path))
    except (KeyError, ET.ParseError):
        return []

    manifest: dict[str, tuple[str, str]] = {}
    for item in root.findall(".//{*}manifest/{*}item"):
        item_id = item.attrib.get("id")
        href = item.attrib.get("href")
        if item_id and href:
            manifest[item_id] = (href, item.attrib.get("media-type", "").lower())

    base = PurePosixPath(opf_path).parent
    members: list[str] = []
    for itemref in root.findall(".//{*}spine/{*}itemref"):
        entry = manifest.get(itemref.attrib.get("idref", ""))
        if entry is None:
            continue
        href, media_type = entry
        if not media_type.startswith(TEXT_MEDIA_PREFIXES):
            continue
        members.append((base / href).as_posix() if str(base) != "." else href)
    return members


def _fallback_members(zf: zipfile.ZipFile) -> list[str]:
    return [
        name
        for name in zf.namelist()
        if PurePosixPath(name).suffix.lower() in TEXT_MEMBER_SUFFIXES
    ]


class _HTMLLineExtractor(HTMLParser):
    """Collect character data, breaking lines at block-level elements."""

    BLOCK_TAGS = {
        "p", "div", "br", "li", "ul", "ol", "section", "article",
        "h1", "h2", "h3", "h4", "h5", "h6", "tr", "blockquote",
    }
    SKIPPED_TAGS = {"script", "style", "head"}

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []
        self._current: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in self.SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_endtag(self, tag: str) -> None:
        if tag in self.SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        # Inline markup can split a word, so keep raw text until the block ends.
        self._current.append(data)

    def close(self) -> None:
        super().close()
        self._flush()

    def _flush(self) -> None:
        line = " ".join("".join(self._current).split())
        self._current = []
        if line:
            self.lines.append(line)


def _html_lines(html: str) -> list[str]:
    parser = _HTMLLineExtractor()
    parser.feed(html)
    parser.close()
    return parser.lines
