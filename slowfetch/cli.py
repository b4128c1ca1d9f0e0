# slowfetch/cli.py
from __future__ import annotations
import argparse, logging, os, shutil, sys
from typing import List

from .config import load_settings
from .app.flow import select_art, build_plan
from .context.system import collect_info, detected_os
from .errors import FatalError
from .ui.layout import TerminalSize
from .ui.render import render

logger = logging.getLogger("slowfetch")

def term_size() -> TerminalSize:
    """Sampled once per run; COLUMNS/LINES win over the tty size."""
    ts = shutil.get_terminal_size((80, 24))
    return TerminalSize(ts.columns, ts.lines)

def _silence_stdout() -> None:
    # a closed pipe would make the interpreter report a second error on exit
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass

def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="slowfetch",
        description="System info next to art, fitted to the terminal.",
    )
    ap.add_argument("--os", nargs="?", const="", default=None, metavar="NAME",
                    help="show OS art; NAME overrides the detected distro (e.g. --os arch)")
    ap.add_argument("-i", "--image", metavar="PATH", help="show a raster image (kitty graphics protocol)")
    ap.add_argument("--refresh", action="store_true", help="ignore cached OS/CPU/GPU values")
    ap.add_argument("--no-color", action="store_true", help="disable colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    term = term_size()
    cfg = load_settings()
    info = collect_info(use_cache=not args.refresh)
    logger.debug("terminal %dx%d, %d info lines", term.columns, term.rows, len(info))

    try:
        art = select_art(cfg, args.os, detected_os(info), args.image)
        plan = build_plan(term, art, info, cfg)
        render(plan, cfg.palette, cfg.theme, color=False if args.no_color else None)
    except FatalError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            _silence_stdout()
        print(f"slowfetch: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
