# slowfetch/ui/render.py
from __future__ import annotations
import logging, sys
from typing import List, Optional, Sequence, TextIO, Tuple

from ..art.glyph import Cell, GlyphArt
from ..art.image import RasterImage
from ..config import Palette, Theme
from ..context.system import InfoLine
from ..errors import RenderWriteError
from ..util.ansi import RESET, color_enabled, crop_visible, cursor_forward, fg, paint, visible_len
from .kitty import image_sequence
from .layout import WIDE, CompositionPlan, section_groups

logger = logging.getLogger(__name__)

BOX_TL, BOX_TR, BOX_BL, BOX_BR = "╭", "╮", "╰", "╯"
BOX_H, BOX_V = "─", "│"

# ── row pieces ─────────────────────────────────────────────────────────────────
def glyph_row(cells: Sequence[Cell], palette: Palette, color: bool = True) -> str:
    """Characters of one art row; a color code only where the palette index changes."""
    out: List[str] = []
    current: Optional[int] = None
    for ch, idx in cells:
        if color and ch != " " and idx != current:
            out.append(fg(palette.color_for(idx)))
            current = idx
        out.append(ch)
    if current is not None:
        out.append(RESET)
    return "".join(out)

def info_text(line: InfoLine, theme: Theme, color: bool = True) -> str:
    label = paint(line.label, theme.key, color)
    if not line.value:
        return label
    return label + InfoLine.SEP + paint(line.value, theme.value, color)

def box_rows(title: str, lines: Sequence[InfoLine], inner: int, theme: Theme,
             color: bool = True) -> List[str]:
    """One rounded box, `inner + 4` cells wide, title centered in the top border."""
    def border(s: str) -> str:
        return paint(s, theme.border, color)

    title = crop_visible(title, inner, ellipsis=False)
    if title:
        dashes = inner - len(title)
        top = (border(BOX_TL + BOX_H * (dashes // 2)) + " " + paint(title, theme.title, color)
               + " " + border(BOX_H * (dashes - dashes // 2) + BOX_TR))
    else:
        top = border(BOX_TL + BOX_H * (inner + 2) + BOX_TR)
    rows = [top]
    for line in lines:
        pad = " " * max(0, inner - visible_len(line.text))
        rows.append(border(BOX_V) + " " + info_text(line, theme, color) + pad + " " + border(BOX_V))
    rows.append(border(BOX_BL + BOX_H * (inner + 2) + BOX_BR))
    return rows

def info_block(plan: CompositionPlan, theme: Theme, color: bool = True) -> List[str]:
    """Rows of the info column, top to bottom."""
    if not plan.boxed:
        return [info_text(l, theme, color) for l in plan.lines]
    rows: List[str] = []
    for title, lines in section_groups(plan.lines):
        rows.extend(box_rows(title, lines, plan.box_inner, theme, color))
    return rows

def _art_segment(plan: CompositionPlan, y: int, palette: Palette, color: bool,
                 continues: bool) -> Tuple[str, int]:
    """(text, visible width) of the art part of row y, starting at plan.art_left."""
    art, r = plan.art, y - plan.art_top
    if art is None or not (0 <= r < plan.art_height):
        return "", 0
    if isinstance(art, GlyphArt):
        cells = art.rows[r][:plan.art_width] if r < art.height else ()
        return glyph_row(cells, palette, color), len(cells)
    if isinstance(art, RasterImage):
        seq = image_sequence(art.png, plan.art_width, plan.art_height) if r == 0 else ""
        if continues:
            return seq + cursor_forward(plan.art_width), plan.art_width
        return seq, 0
    raise TypeError(f"unsupported art type: {type(art).__name__}")

# ── frame ──────────────────────────────────────────────────────────────────────
def compose(plan: CompositionPlan, palette: Palette, theme: Theme, color: bool = True) -> List[str]:
    """All rows of the frame, top to bottom, art and info interleaved per row."""
    block = info_block(plan, theme, color)
    rows: List[str] = []
    for y in range(plan.total_height):
        i = y - plan.info_top
        info = block[i] if 0 <= i < len(block) else None
        art_text, art_vis = _art_segment(plan, y, palette, color,
                                         continues=info is not None and plan.mode == WIDE)
        parts, col = [], 0
        if art_text or art_vis:
            parts.append(" " * plan.art_left)
            parts.append(art_text)
            col = plan.art_left + art_vis
        if info is not None:
            parts.append(" " * max(0, plan.info_left - col))
            parts.append(info)
        rows.append("".join(parts))
    return rows

def render(plan: CompositionPlan, palette: Palette, theme: Theme,
           stream: Optional[TextIO] = None, color: Optional[bool] = None) -> int:
    """Write the frame row by row; returns the number of rows written.

    Raises RenderWriteError when the stream rejects a write (e.g. broken pipe).
    """
    stream = stream or sys.stdout
    if color is None:
        color = color_enabled(stream)
    rows = compose(plan, palette, theme, color)
    logger.debug("rendering %s plan: %d rows", plan.mode, len(rows))
    try:
        for row in rows:
            stream.write(row + "\n")
        stream.flush()
    except (OSError, ValueError) as e:
        raise RenderWriteError(f"write to output failed: {e}") from e
    return len(rows)
