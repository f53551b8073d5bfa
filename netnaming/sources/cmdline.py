"""Kernel command line reader."""

from __future__ import annotations

import logging
import os
import shlex
from pathlib import Path

LOGGER = logging.getLogger(__name__)

PROC_CMDLINE = Path("/proc/cmdline")
INITRD_RELEASE = Path("/etc/initrd-release")
CMDLINE_OVERRIDE_ENV = "SYSTEMD_PROC_CMDLINE"


def _normalize_key(key: str) -> str:
    return key.replace("-", "_")


def _lexer(line: str) -> shlex.shlex:
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    # Backslashes are kept verbatim.
    lexer.escape = ""
    return lexer


def split_cmdline(line: str) -> list[str]:
    lexer = _lexer(line)
    try:
        return list(lexer)
    except ValueError:
        # An unterminated quote runs to the end of the line.
        return list(_lexer(line.rstrip() + lexer.state))


class ProcCmdlineReader:
    def __init__(
        self,
        *,
        path: Path = PROC_CMDLINE,
        initrd_release: Path = INITRD_RELEASE,
    ) -> None:
        self.path = path
        self.initrd_release = initrd_release

    def read(self) -> str:
        override = os.environ.get(CMDLINE_OVERRIDE_ENV)
        if override is not None:
            return override
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            LOGGER.debug("Could not read kernel command line from %s: %s", self.path, exc)
            return ""

    def in_initrd(self) -> bool:
        return self.initrd_release.exists()

    def get_key(self, key: str) -> str | None:
        wanted = {_normalize_key(key)}
        if self.in_initrd():
            wanted.add(_normalize_key(f"rd.{key}"))

        value: str | None = None
        for word in split_cmdline(self.read()):
            name, sep, word_value = word.partition("=")
            if not sep:
                continue
            if _normalize_key(name) in wanted:
                value = word_value
        return value
