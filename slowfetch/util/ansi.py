import os, re, sys

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
RESET = "\033[0m"
ELLIPSIS = "…"

def visible_len(s: str) -> int: return len(ANSI_RE.sub("", s))

def crop_visible(s: str, width: int, ellipsis=True) -> str:
    if width <= 0: return ""
    vis=i=0; out=[]
    while i < len(s) and vis < width:
        if s[i] == "\033":
            m = ANSI_RE.match(s, i)
            if m: out.append(m.group(0)); i=m.end(); continue
        out.append(s[i]); i+=1; vis+=1
    if ellipsis and visible_len(s) > width and width >= 2:
        while out and visible_len("".join(out)) >= width: out.pop()
        out.append(ELLIPSIS)
    return "".join(out)

# named colors → SGR foreground codes
NAMED_COLORS = {
    "default": 39,
    "black": 30, "red": 31, "green": 32, "yellow": 33,
    "blue": 34, "magenta": 35, "cyan": 36, "white": 37,
    "bright_black": 90, "bright_red": 91, "bright_green": 92, "bright_yellow": 93,
    "bright_blue": 94, "bright_magenta": 95, "bright_cyan": 96, "bright_white": 97,
}
HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

def parse_hex(value: str) -> tuple[int, int, int] | None:
    """'#FF79C6' or 'FF79C6' → (255, 121, 198); None when not a 6-digit hex."""
    m = HEX_RE.match(value.strip().strip('"'))
    if not m:
        return None
    h = m.group(1)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)

def is_color(value: str) -> bool:
    v = value.strip().lower().replace("-", "_")
    return v in NAMED_COLORS or parse_hex(v) is not None

def fg(color: str) -> str:
    """SGR sequence selecting `color` as foreground (truecolor for hex)."""
    v = color.strip().lower().replace("-", "_")
    if v in NAMED_COLORS:
        return f"\033[{NAMED_COLORS[v]}m"
    rgb = parse_hex(v)
    if rgb is None:
        return f"\033[{NAMED_COLORS['default']}m"
    return "\033[38;2;{};{};{}m".format(*rgb)

def paint(txt: str, color: str, enabled: bool = True) -> str:
    return f"{fg(color)}{txt}{RESET}" if enabled and txt else txt

def color_enabled(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False

def cursor_forward(n: int) -> str:
    return f"\033[{n}C" if n > 0 else ""
