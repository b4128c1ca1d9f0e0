"""System context: detect OS, hardware basics, shell, desktop, editor prefs."""
from __future__ import annotations
import logging, os, platform, re, shutil, subprocess, time
from dataclasses import dataclass
from typing import Callable, ClassVar, List, Optional

import distro
import psutil

from .cache import cached
from .packages import package_summary

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"

@dataclass(frozen=True)
class InfoLine:
    label: str
    value: str
    section: str = ""       # title of the box the line is grouped under

    SEP: ClassVar[str] = ": "

    @property
    def text(self) -> str:
        return f"{self.label}{self.SEP}{self.value}" if self.value else self.label

# ── formatting helpers ─────────────────────────────────────────────────────────
def format_uptime(seconds: float) -> str:
    s = max(0, int(seconds))
    h, m = s // 3600, (s % 3600) // 60
    return f"{h}h {m}m" if h > 0 else f"{m}m"

def usage_bar(percent: float, slots: int = 10) -> str:
    filled = min(slots, max(0, round(percent / (100 / slots))))
    return "[" + "=" * filled + " " * (slots - filled) + "]"

def format_size(gb: float) -> str:
    return f"{gb / 1024:.2f}TB" if gb >= 1024 else f"{gb:.0f}GB"

def _run(cmd: List[str], timeout: int = 3) -> Optional[str]:
    if not shutil.which(cmd[0]):
        return None
    try:
        r = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError):
        return None
    return (r.stdout or r.stderr) if r.returncode == 0 else None

def _read(path: str) -> Optional[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError:
        return None

# ── probes ─────────────────────────────────────────────────────────────────────
def os_name() -> str:
    name = distro.name(pretty=True)
    return name or platform.system() or "Linux"

def kernel() -> str:
    return platform.release() or UNKNOWN

def uptime() -> str:
    return format_uptime(time.time() - psutil.boot_time())

def cpu() -> str:
    model = ""
    info = _read("/proc/cpuinfo") or ""
    for line in info.splitlines():
        if line.startswith("model name"):
            model = line.split(":", 1)[1].strip()
            break
    model = model or platform.processor() or UNKNOWN
    model = re.sub(r"\s+(\d+-Core|CPU)\s+Processor", "", model)
    model = re.sub(r"\s+@\s+[\d.]+GHz", "", model)
    khz = (_read("/sys/devices/system/cpu/cpu0/cpufreq/cpuinfo_max_freq") or "").strip()
    if khz.isdigit():
        return f"{model} @ {int(khz) / 1_000_000:.2f}GHz"
    return model

GPU_VENDORS = {"Advanced Micro Devices, Inc.": "AMD", "NVIDIA Corporation": "NVIDIA", "Intel Corporation": "Intel"}

def gpu() -> str:
    out = _run(["lspci"])
    if not out:
        return UNKNOWN
    for line in out.splitlines():
        if "VGA compatible controller" in line or "3D controller" in line or "Display controller" in line:
            desc = line.split(": ", 1)[-1]
            desc = re.sub(r"\s*\(rev [0-9a-f]+\)$", "", desc)
            for long_name, short in GPU_VENDORS.items():
                desc = desc.replace(long_name, short)
            return desc.replace("[AMD/ATI] ", "")
    return UNKNOWN

def memory() -> str:
    vm = psutil.virtual_memory()
    gib = 1024 ** 3
    return f"{usage_bar(vm.percent)} {(vm.total - vm.available) / gib:.0f}GB/{vm.total / gib:.0f}GB"

def storage() -> str:
    used = total = 0
    seen = set()
    for part in psutil.disk_partitions(all=False):
        if part.device in seen or part.fstype in ("squashfs", "tmpfs", "overlay"):
            continue
        seen.add(part.device)
        try:
            u = psutil.disk_usage(part.mountpoint)
        except OSError:
            continue
        used += u.used
        total += u.total
    if not total:
        return UNKNOWN
    gib = 1024 ** 3
    return f"{usage_bar(used / total * 100)} {used / gib:.0f}GB/{format_size(total / gib)}"

def terminal() -> str:
    env = os.environ
    if env.get("KITTY_PID") or env.get("KITTY_WINDOW_ID"):
        return "kitty"
    if env.get("KONSOLE_VERSION"):
        return "konsole"
    if env.get("GNOME_TERMINAL_SCREEN"):
        return "gnome-terminal"
    return env.get("TERM_PROGRAM") or env.get("TERM") or UNKNOWN

def shell() -> str:
    path = os.environ.get("SHELL")
    if not path:
        return UNKNOWN
    name = os.path.basename(path)
    out = _run([path, "--version"]) or ""
    m = re.search(r"(\d+\.\d+(?:\.\d+)?)", out)
    return f"{name.capitalize()} {m.group(1)}" if m else name.capitalize()

def wm() -> str:
    env = os.environ
    desktop = env.get("XDG_CURRENT_DESKTOP") or env.get("DESKTOP_SESSION")
    if desktop:
        return desktop.split(":")[0]
    if env.get("WAYLAND_DISPLAY"):
        return "Wayland"
    if env.get("DISPLAY"):
        return "X11"
    return UNKNOWN

# cmdline fragment → desktop shell name, first match wins
UI_SHELLS = [
    ("noctalia-shell", "Noctalia Shell"),
    ("plasmashell", "Plasma Shell"),
    ("gnome-shell", "Gnome Shell"),
    ("waybar", "Custom Waybar setup"),
]

def ui() -> str:
    """Desktop shell / bar currently running, from the process table."""
    cmdlines = []
    for proc in psutil.process_iter(["cmdline"]):
        cmd = proc.info.get("cmdline")
        if cmd:
            cmdlines.append(" ".join(cmd))
    for needle, name in UI_SHELLS:
        if any(needle in c for c in cmdlines):
            return name
    return UNKNOWN

def editor() -> str:
    visual, ed = os.environ.get("VISUAL"), os.environ.get("EDITOR")
    if visual and ed and os.path.basename(visual) != os.path.basename(ed):
        return f"{os.path.basename(visual)} | {os.path.basename(ed)}"
    v = visual or ed
    return os.path.basename(v) if v else UNKNOWN

# ── collection ─────────────────────────────────────────────────────────────────
CACHED_KEYS = {"OS": "os", "CPU": "cpu", "GPU": "gpu"}

PROBES: List[tuple[str, Callable[[], str]]] = [
    ("OS", os_name),
    ("Kernel", kernel),
    ("Uptime", uptime),
    ("CPU", cpu),
    ("GPU", gpu),
    ("Memory", memory),
    ("Storage", storage),
    ("Packages", package_summary),
    ("Terminal", terminal),
    ("Shell", shell),
    ("WM", wm),
    ("UI", ui),
    ("Editor", editor),
]

SECTIONS = {
    "Core": ("OS", "Kernel", "Uptime"),
    "Hardware": ("CPU", "GPU", "Memory", "Storage"),
    "Userspace": ("Packages", "Terminal", "Shell", "WM", "UI", "Editor"),
}
SECTION_OF = {label: title for title, labels in SECTIONS.items() for label in labels}

def _safe(label: str, probe: Callable[[], str]) -> str:
    try:
        return probe() or UNKNOWN
    except Exception as e:  # any probe may fail on exotic systems
        logger.debug("probe %s failed: %s", label, e)
        return UNKNOWN

def collect_info(use_cache: bool = True) -> List[InfoLine]:
    """Ordered info lines; a failing probe shows as 'unknown'."""
    lines = []
    for label, probe in PROBES:
        key = CACHED_KEYS.get(label)
        if key:
            value = cached(key, lambda p=probe, l=label: _safe(l, p), use_cache)
        else:
            value = _safe(label, probe)
        lines.append(InfoLine(label, value, SECTION_OF.get(label, "")))
    return lines

def detected_os(info: List[InfoLine]) -> str:
    return next((l.value for l in info if l.label == "OS"), "")
