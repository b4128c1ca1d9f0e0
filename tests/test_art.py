import pytest

from slowfetch.art.glyph import (
    DEFAULT_INDEX, default_art, load_custom_art, os_art, os_key, parse_glyph_art,
)
from slowfetch.art.logos import OS_LOGOS
from slowfetch.config import DEFAULT_ART_COLORS
from slowfetch.errors import ArtLookupError


def test_markers_switch_index_and_carry_across_lines():
    art = parse_glyph_art("ab{3}c\nd{5}e")
    assert art.rows[0] == (("a", DEFAULT_INDEX), ("b", DEFAULT_INDEX), ("c", 3))
    assert art.rows[1] == (("d", 3), ("e", 5))
    assert art.plain_lines() == ["abc", "de"]


def test_blank_edges_trailing_space_and_tabs():
    art = parse_glyph_art("\n{2}   \n\tx  \n y\n\n")
    assert art.plain_lines() == ["    x", " y"]
    assert art.rows[0][-1] == ("x", 2)
    assert (art.width, art.height) == (5, 2)


def test_empty_art():
    art = parse_glyph_art("\n\n")
    assert (art.width, art.height) == (0, 0)


def test_default_art_widest_first():
    variants = default_art()
    widths = [a.width for a in variants]
    assert len(variants) == 3
    assert widths == sorted(widths, reverse=True)


@pytest.mark.parametrize("name, key", [
    ("Arch Linux", "arch"),
    ("CachyOS Linux", "cachyos"),
    ("Fedora Linux 41 (Workstation Edition)", "fedora"),
    ("Ubuntu 24.04.1 LTS", "ubuntu"),
    ("NixOS 24.05 (Uakari)", "nixos"),
    ("Debian GNU/Linux 12 (bookworm)", "debian"),
    ("arch", "arch"),
])
def test_os_key(name, key):
    assert os_key(name) == key


def test_os_art_variants():
    full, smol = os_art("Arch Linux")
    assert full.name == "arch-full"
    assert smol.name == "arch-smol"
    assert full.width >= smol.width


def test_unknown_os_raises():
    with pytest.raises(ArtLookupError):
        os_art("Plan 9")
    with pytest.raises(ArtLookupError):
        os_art("")


@pytest.mark.parametrize("key", sorted(OS_LOGOS))
def test_builtin_logos_use_default_palette(key):
    for art in os_art(key):
        assert art.height > 0
        assert {idx for row in art.rows for _, idx in row} <= set(DEFAULT_ART_COLORS)


def test_custom_art(tmp_path):
    p = tmp_path / "art.txt"
    p.write_text("{4}/\\\n\\/\n", encoding="utf-8")
    [art] = load_custom_art(str(p))
    assert art.name == "art.txt"
    assert art.plain_lines() == ["/\\", "\\/"]


def test_custom_art_missing_or_empty(tmp_path):
    with pytest.raises(ArtLookupError):
        load_custom_art(str(tmp_path / "nope.txt"))
    empty = tmp_path / "empty.txt"
    empty.write_text("\n  \n", encoding="utf-8")
    with pytest.raises(ArtLookupError):
        load_custom_art(str(empty))


@pytest.mark.parametrize("name, key", [("Nix", "nixos"), ("nix 2.18", "nixos"), ("Phoenix OS", None), ("Unix", None)])
def test_nix_matches_whole_word_only(name, key):
    assert os_key(name) == key
