#!/usr/bin/env python3
"""
Console output for the pocket-sync command.
User-facing notices, encoding-safe printing and logging setup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def safe_print(*args, file=None, **kwargs):
    """print() that degrades to '?' for characters the console can't encode."""
    stream = file or sys.stdout
    try:
        print(*args, file=stream, **kwargs)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "ascii"
        text = " ".join(str(arg) for arg in args)
        print(text.encode(encoding, "replace").decode(encoding), file=stream, **kwargs)


def notify(message):
    """Show a notice to the user on the console."""
    safe_print(f"⚠️  {message}", file=sys.stderr)


def init_console(verbose=False):
    """Prepare stdout/stderr and logging for command-line use."""
    # Windows consoles default to a legacy code page
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="replace")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
