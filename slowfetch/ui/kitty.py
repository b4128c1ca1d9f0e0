"""Kitty graphics protocol framing.

An image is sent as one transmit-and-display command split over escape
sequences of at most CHUNK_SIZE base64 bytes each:

    ESC _G a=T,f=100,q=2,C=1,c=<cols>,r=<rows>,m=1 ; <chunk> ESC \\
    ESC _G m=1 ; <chunk> ESC \\
    ...
    ESC _G m=0 ; <last chunk> ESC \\

The terminal scales the PNG into the c×r cell box. C=1 leaves the cursor
where the image starts.
"""
from __future__ import annotations
import base64, os
from typing import List, Mapping, Optional

CHUNK_SIZE = 4096
APC_START = "\033_G"
APC_END = "\033\\"

def supports_graphics(env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    if env.get("KITTY_WINDOW_ID"):
        return True
    term = env.get("TERM", "")
    if "kitty" in term or "ghostty" in term:
        return True
    return "ghostty" in env.get("TERM_PROGRAM", "").lower()

def chunk_payload(data: bytes, chunk_size: int = CHUNK_SIZE) -> List[str]:
    if chunk_size <= 0 or chunk_size % 4:
        raise ValueError("chunk_size must be a positive multiple of 4")
    encoded = base64.standard_b64encode(data).decode("ascii")
    return [encoded[i:i + chunk_size] for i in range(0, len(encoded), chunk_size)] or [""]

def image_sequence(png: bytes, cols: int, rows: int, chunk_size: int = CHUNK_SIZE) -> str:
    chunks = chunk_payload(png, chunk_size)
    out = []
    for i, chunk in enumerate(chunks):
        more = 1 if i < len(chunks) - 1 else 0
        if i == 0:
            keys = f"a=T,f=100,q=2,C=1,c={cols},r={rows},m={more}"
        else:
            keys = f"m={more}"
        out.append(f"{APC_START}{keys};{chunk}{APC_END}")
    return "".join(out)
