from __future__ import annotations

import zipfile
from pathlib import Path

CONTAINER_XML = """<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def xhtml(*paragraphs: str) -> str:
    """Wrap paragraphs in a minimal XHTML chapter body."""
    body = "".join(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    return f"<html xmlns='http://www.w3.org/1999/xhtml'><body>{body}</body></html>"


def write_minimal_epub(
    path: Path, chapters: list[str], include_spine: bool = True
) -> None:
    """Create a minimal EPUB file with the provided XHTML chapters."""
    manifest_items = []
    spine_items = []
    for idx in range(1, len(chapters) + 1):
        manifest_items.append(
            f'<item id="chap{idx}" href="chapter{idx}.xhtml" '
            'media-type="application/xhtml+xml"/>'
        )
        spine_items.append(f'<itemref idref="chap{idx}"/>')
    spine_block = (
        "<spine>" + "".join(spine_items) + "</spine>" if include_spine else "<spine/>"
    )
    opf = f"""<?xml version="1.0" encoding="utf-8"?>
<package version="3.0" xmlns="http://www.idpf.org/2007/opf">
  <manifest>{''.join(manifest_items)}</manifest>
  {spine_block}
</package>
"""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr(
            "mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED
        )
        zf.writestr("META-INF/container.xml", CONTAINER_XML)
        zf.writestr("OEBPS/content.opf", opf)
        for idx, chapter in enumerate(chapters, start=1):
            zf.writestr(f"OEBPS/chapter{idx}.xhtml", chapter)


def write_book(path: Path, text: str) -> Path:
    """Write a UTF-8 text document and return its path."""
    path.write_text(text, encoding="utf-8")
    return path
