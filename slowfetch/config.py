from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
import logging, os

from .errors import ConfigError
from .util.ansi import is_color

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "default"

# Dracula-ish theme, rainbow art palette
DEFAULT_KEY_COLOR = "#BD93F9"
DEFAULT_VALUE_COLOR = "#8BE9FD"
DEFAULT_BORDER_COLOR = "#FF79C6"
DEFAULT_TITLE_COLOR = "#FF79C6"
DEFAULT_ART_COLORS = {
    1: "#FF0000",  # red
    2: "#FF8000",  # orange
    3: "#FFFF00",  # yellow
    4: "#00FF00",  # green
    5: "#00FFFF",  # cyan
    6: "#00BFFF",  # light blue
    7: "#5555FF",  # blue
    8: "#AA55FF",  # violet
    9: "#FF55FF",  # magenta
}

# ---------- tiny TOML-ish parser ----------
def _strip_comment(v: str) -> str:
    quote = None
    for i, ch in enumerate(v):
        if ch in ("'", '"'):
            quote = None if quote == ch else (quote or ch)
        elif ch == "#" and quote is None:
            return v[:i].rstrip()
    return v

def _parse_tomlish(text: str) -> dict:
    data, section = {}, None
    for n, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("["):
            if not line.endswith("]") or not line[1:-1].strip():
                raise ConfigError(f"line {n}: bad section header {line!r}")
            section = line[1:-1].strip()
            if not isinstance(data.setdefault(section, {}), dict):
                raise ConfigError(f"line {n}: section [{section}] clashes with key {section!r}")
            continue
        if "=" not in line:
            raise ConfigError(f"line {n}: expected 'key = value', got {line!r}")
        k, v = [s.strip() for s in line.split("=", 1)]
        v = _strip_comment(v)
        if not k:
            raise ConfigError(f"line {n}: missing key")
        # booleans / numbers / strings
        if v.lower() in ("true", "false"):
            val = (v.lower() == "true")
        elif len(v) >= 2 and v[0] in ("'", '"') and v[-1] == v[0]:
            val = v[1:-1]
        else:
            try:
                val = float(v) if "." in v else int(v)
            except ValueError:
                val = v
        if section:
            data[section][k] = val
        else:
            data[k] = val
    return data

def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")

DEFAULT_TEXT = """\
# slowfetch config

# OS art: true = detect from the running OS, false = default logo,
# or a name such as "arch" to force a logo
os_art = false

# custom_art = "~/.config/slowfetch/art.txt"

# show a raster image instead of art (kitty graphics protocol)
image = false
# image_path = "~/Pictures/logo.png"

[colors]
border = "#FF79C6"
title = "#FF79C6"
key = "#BD93F9"
value = "#8BE9FD"
art_1 = "#FF0000"
art_2 = "#FF8000"
art_3 = "#FFFF00"
art_4 = "#00FF00"
art_5 = "#00FFFF"
art_6 = "#00BFFF"
art_7 = "#5555FF"
art_8 = "#AA55FF"
art_9 = "#FF55FF"

[layout]
# draw Core / Hardware / Userspace as boxes
boxes = true
gutter = 2
min_columns = 20
min_rows = 5
image_width_fraction = 0.5
image_min_rows = 8
"""

@dataclass(frozen=True)
class Palette:
    """Palette index → color, with a fallback for indices it does not define."""
    colors: dict[int, str] = field(default_factory=lambda: dict(DEFAULT_ART_COLORS))
    fallback: str = FALLBACK_COLOR

    def color_for(self, index: int) -> str:
        return self.colors.get(index, self.fallback)

@dataclass(frozen=True)
class Theme:
    key: str = DEFAULT_KEY_COLOR
    value: str = DEFAULT_VALUE_COLOR
    border: str = DEFAULT_BORDER_COLOR
    title: str = DEFAULT_TITLE_COLOR

@dataclass(frozen=True)
class Settings:
    os_art: bool | str = False          # False, True (auto-detect) or an OS name
    custom_art: str | None = None
    image: bool = False
    image_path: str | None = None
    palette: Palette = field(default_factory=Palette)
    theme: Theme = field(default_factory=Theme)
    layout: dict = field(default_factory=dict)   # LayoutOptions overrides

def _config_path() -> Path:
    env = os.environ.get("SLOWFETCH_CONFIG")
    if env:
        return Path(env).expanduser()
    return _xdg_config_home() / "slowfetch" / "config.toml"

def ensure_default_config() -> Path:
    p = _config_path()
    if os.environ.get("SLOWFETCH_CONFIG"):
        return p
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        if not p.exists():
            p.write_text(DEFAULT_TEXT, encoding="utf-8")
    except OSError as e:
        logger.warning("could not write default config %s: %s", p, e)
    return p

def _expand(path: str) -> str:
    return os.path.expanduser(path)

THEME_KEYS = ("key", "value", "border", "title")

# [layout] key → (type, accepted range)
LAYOUT_KEYS = {
    "gutter": (int, lambda v: v >= 0),
    "min_columns": (int, lambda v: v >= 1),
    "min_rows": (int, lambda v: v >= 1),
    "image_width_fraction": (float, lambda v: 0 < v <= 1),
    "image_min_rows": (int, lambda v: v >= 1),
    "boxes": (bool, lambda v: True),
}

def _layout_value(key: str, raw):
    """Converted value for a [layout] key, or None when unknown or out of range."""
    spec = LAYOUT_KEYS.get(key)
    if spec is None:
        return None
    conv, ok = spec
    if (conv is bool) != isinstance(raw, bool):
        return None
    try:
        val = conv(raw)
    except (TypeError, ValueError):
        return None
    return val if ok(val) else None

def _table(d: dict, name: str) -> dict:
    t = d.get(name, {})
    if isinstance(t, dict):
        return t
    logger.warning("config: %s should be a [%s] section, got %r", name, name, t)
    return {}

def settings_from_dict(d: dict) -> Settings:
    """Build Settings from parsed config data; invalid values are logged and skipped."""
    s = Settings()

    os_art = d.get("os_art", s.os_art)
    if isinstance(os_art, bool):
        s = replace(s, os_art=os_art)
    elif isinstance(os_art, str) and os_art.strip():
        s = replace(s, os_art=os_art.strip())
    else:
        logger.warning("config: ignoring os_art = %r", os_art)

    custom = d.get("custom_art")
    if isinstance(custom, str) and custom.strip():
        s = replace(s, custom_art=_expand(custom.strip()))

    image = d.get("image", s.image)
    if isinstance(image, bool):
        s = replace(s, image=image)
    else:
        logger.warning("config: ignoring image = %r", image)

    image_path = d.get("image_path")
    if isinstance(image_path, str) and image_path.strip():
        s = replace(s, image_path=_expand(image_path.strip()))

    theme = {f: getattr(s.theme, f) for f in THEME_KEYS}
    art = dict(s.palette.colors)
    for k, v in _table(d, "colors").items():
        if not isinstance(v, str) or not is_color(v):
            logger.warning("config: [colors] %s = %r is not a color", k, v)
            continue
        if k in THEME_KEYS:
            theme[k] = v
        elif k.startswith("art_") and k[4:].isdigit():
            art[int(k[4:])] = v
        else:
            logger.debug("config: unknown color %s", k)
    s = replace(s, theme=Theme(**theme), palette=Palette(colors=art))

    layout = {}
    for k, v in _table(d, "layout").items():
        val = _layout_value(k, v)
        if val is None:
            logger.warning("config: ignoring [layout] %s = %r", k, v)
        else:
            layout[k] = val
    return replace(s, layout=layout)

def load_settings() -> Settings:
    p = ensure_default_config()
    try:
        text = p.read_text(encoding="utf-8") if p.exists() else DEFAULT_TEXT
        d = _parse_tomlish(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("config: cannot read %s (%s); using defaults", p, e)
        return Settings()
    except ConfigError as e:
        logger.warning("config: %s: %s; using defaults", p, e)
        return Settings()
    return settings_from_dict(d)
