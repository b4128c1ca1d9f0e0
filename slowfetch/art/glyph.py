"""Glyph art: palette-indexed text art and the built-in art repository."""
from __future__ import annotations
import logging, os, re
from dataclasses import dataclass
from typing import List, Tuple

from ..errors import ArtLookupError
from .logos import DEFAULT_LOGO, OS_LOGOS, OS_MATCHERS

logger = logging.getLogger(__name__)

MARKER_RE = re.compile(r"\{(\d+)\}")
DEFAULT_INDEX = 1

Cell = Tuple[str, int]

@dataclass(frozen=True)
class GlyphArt:
    rows: Tuple[Tuple[Cell, ...], ...]
    name: str = ""

    @property
    def width(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def plain_lines(self) -> List[str]:
        return ["".join(ch for ch, _ in row) for row in self.rows]

def _parse_row(line: str, index: int) -> Tuple[Tuple[Cell, ...], int]:
    cells: List[Cell] = []
    pos = 0
    for m in MARKER_RE.finditer(line):
        cells.extend((ch, index) for ch in line[pos:m.start()])
        index = int(m.group(1))
        pos = m.end()
    cells.extend((ch, index) for ch in line[pos:])
    return tuple(cells), index

def parse_glyph_art(text: str, name: str = "") -> GlyphArt:
    """Parse `{n}`-marked art text. The active color carries across lines.

    Leading/trailing blank lines are dropped, trailing spaces trimmed; tabs
    become four spaces.
    """
    rows, index = [], DEFAULT_INDEX
    for line in text.splitlines():
        row, index = _parse_row(line.replace("\t", "    "), index)
        while row and row[-1][0].isspace():
            row = row[:-1]
        rows.append(row)
    # markers on dropped blank lines still set the color for what follows
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    return GlyphArt(rows=tuple(rows), name=name)

def default_art() -> List[GlyphArt]:
    """The slowfetch logo, widest variant first."""
    return [parse_glyph_art(DEFAULT_LOGO[k], name=f"default-{k}") for k in ("wide", "medium", "narrow")]

def os_key(os_name: str) -> str | None:
    low = (os_name or "").lower()
    for keywords, key in OS_MATCHERS:
        if any(re.search(k, low) for k in keywords):
            return key
    return None

def os_art(os_name: str) -> List[GlyphArt]:
    """OS logo variants (full, smol) for a distro name such as 'Arch Linux'."""
    key = os_key(os_name)
    if key is None:
        raise ArtLookupError(f"no art for OS {os_name!r}")
    variants = OS_LOGOS[key]
    return [parse_glyph_art(variants[v], name=f"{key}-{v}") for v in ("full", "smol") if v in variants]

def load_custom_art(path: str) -> List[GlyphArt]:
    p = os.path.expanduser(path)
    try:
        with open(p, encoding="utf-8") as f:
            art = parse_glyph_art(f.read(), name=os.path.basename(p))
    except (OSError, UnicodeDecodeError) as e:
        raise ArtLookupError(f"cannot read custom art {p}: {e}") from e
    if not art.height:
        raise ArtLookupError(f"custom art {p} is empty")
    return [art]
