"""Verbose-gated console output shared by the library and the CLI."""

from __future__ import annotations

VERBOSE = False


def set_verbose(flag: bool) -> None:
    global VERBOSE
    VERBOSE = bool(flag)


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)
