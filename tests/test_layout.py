import pytest

from slowfetch.art.glyph import parse_glyph_art
from slowfetch.art.image import RasterImage
from slowfetch.context.system import InfoLine
from slowfetch.ui.layout import (
    MINIMAL, NARROW, WIDE,
    LayoutOptions, TerminalSize,
    image_cell_box, min_info_width, plan_layout, section_groups, truncate_line,
)
from slowfetch.util.ansi import visible_len


def _art(w, h, ch="#"):
    return parse_glyph_art("\n".join(ch * w for _ in range(h)))

def _info(n, value="value"):
    return [InfoLine(f"Key{i}", value) for i in range(n)]


def test_reference_terminal_is_wide():
    plan = plan_layout(TerminalSize(80, 24), _art(10, 3), _info(5))
    gutter = LayoutOptions().gutter
    assert plan.mode == WIDE
    assert (plan.art_left, plan.art_width, plan.art_height) == (0, 10, 3)
    assert plan.info_left == 10 + gutter
    assert plan.art_top == plan.info_top == 0
    assert plan.total_height == 5
    assert plan.info_width == 80 - (10 + gutter)


def test_mode_threshold_is_exact():
    art, info = _art(10, 3), _info(5)
    opts = LayoutOptions()
    threshold = 10 + min_info_width(info, opts) + opts.gutter
    assert plan_layout(TerminalSize(threshold, 24), art, info).mode == WIDE
    assert plan_layout(TerminalSize(threshold - 1, 24), art, info).mode == NARROW


def test_mode_threshold_is_monotonic():
    art, info = _art(10, 3), _info(5)
    opts = LayoutOptions()
    threshold = 10 + min_info_width(info, opts) + opts.gutter
    modes = [plan_layout(TerminalSize(c, 24), art, info).mode for c in range(opts.min_columns, 60)]
    for c, mode in zip(range(opts.min_columns, 60), modes):
        assert (mode == WIDE) == (c >= threshold)


def test_min_info_width_without_info_uses_floor():
    opts = LayoutOptions()
    assert min_info_width([], opts) == opts.min_info_width
    plan = plan_layout(TerminalSize(80, 24), _art(10, 3), [])
    assert plan.mode == WIDE
    assert plan.total_height == 3


def test_narrow_centers_art_and_stacks_info():
    plan = plan_layout(TerminalSize(22, 24), _art(10, 3), _info(5))
    assert plan.mode == NARROW
    assert plan.art_left == 6
    assert plan.info_left == 0
    assert plan.info_top == 3
    assert plan.total_height == 8


def test_narrow_truncates_long_lines():
    info = [InfoLine("CPU", "AMD Ryzen 9 7950X 16-Core Processor @ 5.88GHz")]
    plan = plan_layout(TerminalSize(22, 24), _art(10, 3), info)
    assert plan.mode == NARROW
    assert visible_len(plan.lines[0].text) == 22
    assert plan.lines[0].text.endswith("…")
    assert plan.lines[0].label == "CPU"


@pytest.mark.parametrize("size", [TerminalSize(15, 24), TerminalSize(80, 4)])
def test_small_terminal_falls_back_to_minimal(size):
    info = [InfoLine("OS", "CachyOS"), InfoLine("Kernel", "6.18.44-1-cachyos-bore-lto")]
    plan = plan_layout(size, _art(10, 3), info)
    assert plan.mode == MINIMAL
    assert plan.art is None
    assert len(plan.lines) <= size.rows
    for line in plan.lines:
        assert visible_len(line.text) <= size.columns
        assert "…" not in line.text


def test_stacked_art_that_does_not_fit_is_dropped():
    plan = plan_layout(TerminalSize(22, 6), _art(10, 3), _info(5))
    assert plan.mode == MINIMAL
    assert len(plan.lines) == 5


def test_no_art_gives_minimal_plan():
    plan = plan_layout(TerminalSize(80, 24), None, _info(3))
    assert plan.mode == MINIMAL
    assert [l.label for l in plan.lines] == ["Key0", "Key1", "Key2"]


def test_first_fitting_variant_wins():
    big, small = _art(60, 3), _art(20, 3)
    info = _info(4)
    assert plan_layout(TerminalSize(80, 24), [big, small], info).art is big
    assert plan_layout(TerminalSize(50, 24), [big, small], info).art is small


def test_narrow_skips_variants_wider_than_terminal():
    big, small = _art(60, 3), _art(25, 3)
    info = [InfoLine("Packages", "1234 (pacman), 12 (flatpak)")]
    plan = plan_layout(TerminalSize(40, 24), [big, small], info)
    assert plan.mode == NARROW
    assert plan.art is small


@pytest.mark.parametrize("columns", [1, 5, 15, 20, 23, 40, 80, 200])
@pytest.mark.parametrize("rows", [1, 3, 5, 10, 24])
def test_plan_never_exceeds_terminal(columns, rows):
    term = TerminalSize(columns, rows)
    arts = [
        _art(10, 3),
        _art(100, 40),
        [_art(60, 20), _art(20, 6)],
        RasterImage("wide.png", 1000, 100),
        RasterImage("tall.png", 100, 1000),
    ]
    info = _info(12, "a fairly long value for the info column")
    for art in arts:
        plan = plan_layout(term, art, info)
        assert plan.total_width <= columns
        assert plan.total_height <= rows


@pytest.mark.parametrize("width", [1, 2, 5, 8, 12, 30, 40])
def test_truncation_is_idempotent(width):
    line = InfoLine("Memory", "[=====     ] 7GB/16GB")
    once = truncate_line(line, width)
    assert truncate_line(once, width) == once
    assert visible_len(once.text) <= width


def test_truncation_keeps_label_and_marks_value():
    line = truncate_line(InfoLine("Memory", "[=====     ] 7GB/16GB"), 12)
    assert line.label == "Memory"
    assert line.value == "[==…"


def test_hard_truncation_has_no_ellipsis():
    line = truncate_line(InfoLine("Memory", "[=====     ] 7GB/16GB"), 12, ellipsis=False)
    assert line.text == "Memory: [==="


def test_image_cell_box_keeps_aspect():
    square = RasterImage("sq.png", 100, 100)
    assert image_cell_box(square, TerminalSize(200, 50), 5, LayoutOptions()) == (16, 8)


def test_image_cell_box_is_capped_by_width_fraction():
    wide = RasterImage("wide.png", 1000, 100)
    cols, rows = image_cell_box(wide, TerminalSize(80, 24), 5, LayoutOptions())
    assert cols == 40
    assert rows == 2


def test_image_cell_box_is_capped_by_rows():
    tall = RasterImage("tall.png", 100, 1000)
    cols, rows = image_cell_box(tall, TerminalSize(80, 10), 12, LayoutOptions())
    assert rows == 10
    assert cols == 2


def test_layout_options_overrides_ignore_unknown_keys():
    opts = LayoutOptions.from_overrides({"gutter": 4, "bogus": 1})
    assert opts.gutter == 4
    assert opts.min_columns == LayoutOptions().min_columns


@pytest.mark.parametrize("overrides", [
    {"gutter": -5},
    {"image_width_fraction": 0},
    {"image_width_fraction": 1.5},
    {"min_rows": 0},
    {"image_min_rows": 0},
])
def test_layout_options_reject_out_of_range(overrides):
    with pytest.raises(ValueError):
        LayoutOptions.from_overrides(overrides)


BOXED = LayoutOptions(boxes=True)

def _sectioned():
    return [
        InfoLine("OS", "Arch Linux", "Core"),
        InfoLine("Kernel", "6.18", "Core"),
        InfoLine("CPU", "Ryzen 7", "Hardware"),
    ]


def test_section_groups_keep_order():
    groups = section_groups(_sectioned())
    assert [(title, len(lines)) for title, lines in groups] == [("Core", 2), ("Hardware", 1)]


def test_boxed_info_block_geometry():
    info = _sectioned()
    assert min_info_width(info, BOXED) == len("OS: Arch Linux") + 4
    plan = plan_layout(TerminalSize(80, 24), _art(10, 3), info, BOXED)
    assert plan.mode == WIDE
    assert plan.boxed
    assert plan.info_height == 3 + 2 * 2
    assert plan.total_height == 7
    assert plan.total_width == 12 + len("OS: Arch Linux") + 4


def test_boxed_threshold_counts_borders():
    info = _sectioned()
    threshold = 10 + min_info_width(info, BOXED) + BOXED.gutter
    assert plan_layout(TerminalSize(threshold, 24), _art(10, 3), info, BOXED).mode == WIDE
    assert plan_layout(TerminalSize(threshold - 1, 24), _art(10, 3), info, BOXED).mode == NARROW


def test_boxed_titles_widen_the_column():
    info = [InfoLine("OS", "x", "A rather long section title")]
    assert min_info_width(info, BOXED) == len("A rather long section title") + 4


def test_boxed_wide_drops_lines_that_do_not_fit():
    info = [InfoLine(f"Key{i}", "v", f"S{i % 3}") for i in range(9)]
    plan = plan_layout(TerminalSize(80, 6), _art(10, 3), info, BOXED)
    assert plan.mode == WIDE
    assert plan.total_height <= 6
    assert plan.info_height <= 6


def test_minimal_plan_is_never_boxed():
    plan = plan_layout(TerminalSize(15, 24), _art(10, 3), _sectioned(), BOXED)
    assert plan.mode == MINIMAL
    assert not plan.boxed


@pytest.mark.parametrize("columns", [20, 23, 30, 40, 80])
@pytest.mark.parametrize("rows", [5, 8, 10, 24])
def test_boxed_plan_never_exceeds_terminal(columns, rows):
    term = TerminalSize(columns, rows)
    info = [InfoLine(f"Key{i}", "a fairly long value for the info column", f"Section{i // 4}")
            for i in range(12)]
    for art in (_art(10, 3), _art(30, 10), RasterImage("sq.png", 100, 100)):
        plan = plan_layout(term, art, info, BOXED)
        assert plan.total_width <= columns
        assert plan.total_height <= rows
