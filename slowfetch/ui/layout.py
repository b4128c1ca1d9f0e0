# slowfetch/ui/layout.py
"""
Layout engine: decides how art and info lines share the terminal.

Modes:
    wide     art on the left, info to its right, separated by a gutter
    narrow   art on top (centered), info right below it
    minimal  terminal too small for art; info lines only

With `boxes` on, the info column is drawn as one rounded box per section
(two border rows and four border/padding columns per box); minimal plans
are never boxed.

plan_layout() is pure: same inputs, same plan. The plan never exceeds the
terminal in either dimension; lines are truncated instead.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import List, Optional, Sequence, Tuple, Union

from ..art.glyph import GlyphArt
from ..art.image import RasterImage
from ..context.system import InfoLine
from ..util.ansi import crop_visible, visible_len

Art = Union[GlyphArt, RasterImage]

WIDE, NARROW, MINIMAL = "wide", "narrow", "minimal"

BOX_PAD = 4     # "│ " + content + " │"

@dataclass(frozen=True)
class TerminalSize:
    columns: int
    rows: int

@dataclass(frozen=True)
class LayoutOptions:
    gutter: int = 2
    min_info_width: int = 10          # used when there are no info lines
    min_columns: int = 20
    min_rows: int = 5
    image_width_fraction: float = 0.5
    image_min_rows: int = 8
    cell_aspect: float = 2.0          # cell height / cell width
    boxes: bool = False               # draw info sections as titled boxes

    def __post_init__(self):
        if self.gutter < 0 or self.min_info_width < 0:
            raise ValueError("gutter and min_info_width must be >= 0")
        if self.min_columns < 1 or self.min_rows < 1 or self.image_min_rows < 1:
            raise ValueError("min_columns, min_rows and image_min_rows must be >= 1")
        if not 0 < self.image_width_fraction <= 1:
            raise ValueError("image_width_fraction must be in (0, 1]")
        if self.cell_aspect <= 0:
            raise ValueError("cell_aspect must be > 0")

    @classmethod
    def from_overrides(cls, overrides: dict | None) -> "LayoutOptions":
        known = {f.name for f in fields(cls)}
        return replace(cls(), **{k: v for k, v in (overrides or {}).items() if k in known})

# ── info block geometry ───────────────────────────────────────────────────────
def section_groups(lines: Sequence[InfoLine]) -> List[Tuple[str, List[InfoLine]]]:
    """Consecutive lines sharing a section title, in order."""
    groups: List[Tuple[str, List[InfoLine]]] = []
    for line in lines:
        if groups and groups[-1][0] == line.section:
            groups[-1][1].append(line)
        else:
            groups.append((line.section, [line]))
    return groups

def box_inner_width(lines: Sequence[InfoLine]) -> int:
    """Shared inner width of all section boxes: widest line or title."""
    texts = [visible_len(l.text) for l in lines]
    titles = [len(title) for title, _ in section_groups(lines)]
    return max(texts + titles, default=0)

def info_block_height(lines: Sequence[InfoLine], boxed: bool) -> int:
    if boxed and lines:
        return len(lines) + 2 * len(section_groups(lines))
    return len(lines)

def _fit_rows(lines: Sequence[InfoLine], rows: int, boxed: bool) -> List[InfoLine]:
    kept = list(lines[:max(0, rows)])
    while kept and info_block_height(kept, boxed) > rows:
        kept.pop()
    return kept

@dataclass(frozen=True)
class CompositionPlan:
    mode: str
    terminal: TerminalSize
    art: Optional[Art]
    art_width: int
    art_height: int
    art_left: int
    art_top: int
    info_left: int
    info_top: int
    info_width: int
    lines: Tuple[InfoLine, ...]
    gutter: int = 0
    boxed: bool = False

    @property
    def box_inner(self) -> int:
        return max(0, min(box_inner_width(self.lines), self.info_width - BOX_PAD))

    @property
    def info_height(self) -> int:
        return info_block_height(self.lines, self.boxed)

    @property
    def info_block_width(self) -> int:
        if self.boxed and self.lines:
            return self.box_inner + BOX_PAD
        return max((visible_len(l.text) for l in self.lines), default=0)

    @property
    def total_height(self) -> int:
        art_bottom = self.art_top + self.art_height if self.art is not None else 0
        return max(art_bottom, self.info_top + self.info_height if self.lines else 0)

    @property
    def total_width(self) -> int:
        art_right = self.art_left + self.art_width if self.art is not None else 0
        info_right = self.info_left + self.info_block_width if self.lines else 0
        return max(art_right, info_right)

# ── truncation ────────────────────────────────────────────────────────────────
def truncate_line(line: InfoLine, width: int, ellipsis: bool = True) -> InfoLine:
    """Fit `line` into `width` cells. Lines that already fit come back unchanged."""
    if visible_len(line.text) <= width:
        return line
    room = width - visible_len(line.label) - visible_len(InfoLine.SEP)
    if line.value and room >= 1:
        return replace(line, value=crop_visible(line.value, room, ellipsis=ellipsis))
    return replace(line, label=crop_visible(line.text, width, ellipsis=ellipsis), value="")

def min_info_width(info: Sequence[InfoLine], options: LayoutOptions) -> int:
    if not info:
        return options.min_info_width
    if options.boxes:
        return box_inner_width(info) + BOX_PAD
    return max(visible_len(l.text) for l in info)

# ── art footprint ─────────────────────────────────────────────────────────────
def image_cell_box(image: RasterImage, term: TerminalSize, info_count: int,
                   options: LayoutOptions) -> Tuple[int, int]:
    """Target (columns, rows) for an image, keeping its aspect ratio in cells.

    The terminal scales the image into the box, so only the box is computed.
    `info_count` is the height of the info block in rows.
    """
    ratio = image.width / image.height * options.cell_aspect   # columns per row
    rows = max(info_count, options.image_min_rows, 1)
    cols = max(1, round(rows * ratio))
    max_cols = max(1, int(term.columns * options.image_width_fraction))
    if cols > max_cols:
        cols = max_cols
        rows = max(1, round(cols / ratio))
    if rows > term.rows:
        rows = max(1, term.rows)
        cols = min(cols, max(1, round(rows * ratio)))
    return cols, rows

def art_footprint(art: Art, term: TerminalSize, info_count: int,
                  options: LayoutOptions) -> Tuple[int, int]:
    if isinstance(art, GlyphArt):
        return art.width, art.height
    if isinstance(art, RasterImage):
        return image_cell_box(art, term, info_count, options)
    raise TypeError(f"unsupported art type: {type(art).__name__}")

# ── plans ─────────────────────────────────────────────────────────────────────
def _truncated(info: Sequence[InfoLine], width: int, boxed: bool) -> Tuple[InfoLine, ...]:
    room = width - BOX_PAD if boxed else width
    return tuple(truncate_line(l, room) for l in info)

def _minimal(term: TerminalSize, info: Sequence[InfoLine]) -> CompositionPlan:
    lines = tuple(truncate_line(l, term.columns, ellipsis=False) for l in info[:max(0, term.rows)])
    return CompositionPlan(MINIMAL, term, None, 0, 0, 0, 0, 0, 0, max(0, term.columns), lines)

def _wide(term: TerminalSize, art: Art, w: int, h: int, info: Sequence[InfoLine],
          options: LayoutOptions) -> CompositionPlan:
    info_left = w + options.gutter
    info_width = term.columns - info_left
    art_h = min(h, term.rows)
    lines = _truncated(_fit_rows(info, term.rows, options.boxes), info_width, options.boxes)
    return CompositionPlan(WIDE, term, art, w, art_h, 0, 0, info_left, 0, info_width, lines,
                           gutter=options.gutter, boxed=options.boxes)

def _narrow(term: TerminalSize, art: Art, w: int, h: int,
            info: Sequence[InfoLine], options: LayoutOptions) -> CompositionPlan:
    left = (term.columns - w) // 2 if term.columns > w else 0
    lines = _truncated(info, term.columns, options.boxes)
    return CompositionPlan(NARROW, term, art, w, h, left, 0, 0, h, term.columns, lines,
                           boxed=options.boxes)

def _variants(art: Union[Art, Sequence[Art], None]) -> List[Art]:
    if art is None:
        return []
    if isinstance(art, (GlyphArt, RasterImage)):
        return [art]
    return [a for a in art if a is not None]

def plan_layout(term: TerminalSize,
                art: Union[Art, Sequence[Art], None],
                info: Sequence[InfoLine],
                options: LayoutOptions | None = None) -> CompositionPlan:
    """Compute the composition plan for one frame.

    `art` may be a single art block or variants ordered largest first; the
    first variant that fits side by side wins, then the first that fits
    stacked. Empty art (zero width or height) is treated as no art.
    """
    options = options or LayoutOptions()
    info = list(info)
    if term.columns < options.min_columns or term.rows < options.min_rows:
        return _minimal(term, info)

    block_h = info_block_height(info, options.boxes)
    sized = []
    for a in _variants(art):
        w, h = art_footprint(a, term, block_h, options)
        if w > 0 and h > 0:
            sized.append((a, w, h))

    threshold_info = min_info_width(info, options) + options.gutter
    for a, w, h in sized:
        if term.columns >= w + threshold_info:
            return _wide(term, a, w, h, info, options)
    for a, w, h in sized:
        if w <= term.columns and h + block_h <= term.rows:
            return _narrow(term, a, w, h, info, options)
    return _minimal(term, info)
