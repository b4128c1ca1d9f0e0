"""Error taxonomy for slowfetch.

Degradable errors (config, art lookup) are logged and replaced by defaults.
Fatal errors (image decode, output write) end the run with exit code 1 and a
one-line message on stderr.
"""
from __future__ import annotations


class SlowfetchError(Exception):
    """Base slowfetch error (do not raise directly)."""

class ConfigError(SlowfetchError):
    """Malformed config file or value; defaults are used instead."""

class ArtLookupError(SlowfetchError):
    """Unknown OS art name or unreadable custom art; default art is used instead."""

class FatalError(SlowfetchError):
    """Errors at the terminal boundary that abort the run."""

class ImageDecodeError(FatalError):
    """Raster image missing, unreadable or not decodable."""

class RenderWriteError(FatalError):
    """Writing the frame to the output stream failed."""

__all__ = [
    "SlowfetchError",
    "ConfigError",
    "ArtLookupError",
    "FatalError",
    "ImageDecodeError",
    "RenderWriteError",
]
