"""Persistent cache for slow-to-probe values (OS, CPU, GPU)."""
from __future__ import annotations
import logging, os
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

def _xdg_cache_home() -> Path:
    return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")

def cache_dir() -> Path:
    return _xdg_cache_home() / "slowfetch"

def read_cache(key: str) -> Optional[str]:
    p = cache_dir() / key
    try:
        value = p.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return value or None

def write_cache(key: str, value: str) -> None:
    try:
        d = cache_dir()
        d.mkdir(parents=True, exist_ok=True)
        (d / key).write_text(value, encoding="utf-8")
    except OSError as e:
        logger.debug("cache write %s failed: %s", key, e)

def cached(key: str, probe: Callable[[], str], use_cache: bool = True) -> str:
    """Return the cached value for `key`, or run `probe` and store its result."""
    if use_cache:
        hit = read_cache(key)
        if hit is not None:
            return hit
    value = probe()
    if value and value != "unknown":
        write_cache(key, value)
    return value
