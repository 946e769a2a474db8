# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Txtidy Contributors
#
# This file is part of Txtidy.
#
# Txtidy is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Txtidy is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import sys
from typing import TextIO

ELLIPSIS = "…"


class FileLineWriter:
    """
    Writes the one output line that belongs to a visited file.

    A line is "{path} …" followed by an outcome suffix. In verbose mode the
    prefix is printed eagerly before any I/O on the file; otherwise it is held
    back until an outcome actually needs to be shown. Either way it is printed
    at most once per file, and never for files that stay silent.
    """

    def __init__(self, *, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self._stream = stream
        self._path: str | None = None
        self._prefixed = False

    @property
    def stream(self) -> TextIO:
        # resolved lazily so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    def begin(self, path: str) -> None:
        self._path = path
        self._prefixed = False
        if self.verbose:
            self._emit_prefix()

    def fixed(self) -> None:
        self._finish(" fixed.\n")

    def error(self, message: str) -> None:
        self._finish(f" error: {message}\n")

    def unchanged(self) -> None:
        if self._prefixed:
            self._finish("\n")
        self._path = None

    def _emit_prefix(self) -> None:
        if self._prefixed or self._path is None:
            return
        self._write(f"{self._path} {ELLIPSIS}")
        self._prefixed = True

    def _finish(self, suffix: str) -> None:
        self._emit_prefix()
        self._write(suffix)
        self._path = None
        self._prefixed = False

    def _write(self, text: str) -> None:
        """
        Write `text` as UTF-8. Paths from the walker keep undecodable name bytes
        as surrogate escapes; those go out as the original bytes.
        """
        stream = self.stream
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(text)
            stream.flush()
            return
        stream.flush()
        buffer.write(text.encode("utf-8", "surrogateescape"))
        buffer.flush()
