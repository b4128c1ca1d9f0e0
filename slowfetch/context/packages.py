# slowfetch/context/packages.py
"""
Installed-package counts per package manager.

- Knows how to LIST installed packages per PM and counts the output lines.
- Skips PMs that are not on PATH.

Public API:
    available_pms() -> list[str]
    count_packages(pm: str) -> int | None
    package_summary() -> str          # "1234 (pacman), 12 (flatpak)"
"""

from __future__ import annotations
import logging
import shutil
import subprocess
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# ---------------- Registry ----------------

# How to list installed packages, one per line
LIST_CMDS: Dict[str, List[str]] = {
    "pacman": ["pacman", "-Qq"],
    "dpkg":   ["dpkg-query", "-f", "${binary:Package}\n", "-W"],
    "rpm":    ["rpm", "-qa"],
    "flatpak":["flatpak", "list", "--app", "--columns=application"],
    "snap":   ["snap", "list"],
    "nix":    ["nix-env", "-q"],
    "brew":   ["brew", "list", "-1"],
}

# Lines of header output to drop before counting
HEADER_LINES: Dict[str, int] = {
    "snap": 1,
}

# ---------------- Availability ----------------

def available_pms() -> List[str]:
    """PMs from the registry whose list command is installed, in registry order."""
    return [pm for pm, cmd in LIST_CMDS.items() if shutil.which(cmd[0])]

# ---------------- Running & counting ----------------

def _run(cmd: List[str], timeout: int = 10) -> Optional[str]:
    try:
        r = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("%s failed: %s", cmd[0], e)
        return None
    if r.returncode != 0:
        logger.debug("%s exited %d", cmd[0], r.returncode)
        return None
    return r.stdout

def count_packages(pm: str) -> Optional[int]:
    cmd = LIST_CMDS.get(pm)
    if not cmd:
        return None
    out = _run(cmd)
    if out is None:
        return None
    lines = [l for l in out.splitlines() if l.strip()]
    return max(0, len(lines) - HEADER_LINES.get(pm, 0))

def package_summary() -> str:
    parts = []
    for pm in available_pms():
        n = count_packages(pm)
        if n:
            parts.append(f"{n} ({pm})")
    return ", ".join(parts) if parts else "unknown"
