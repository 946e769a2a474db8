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

import os
import stat
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from txtidy.core.config import Options
from txtidy.core.errors import WalkError
from txtidy.core.patterns import match_any_glob
from txtidy.core.tidy import tidy
from txtidy.reporting.text import FileLineWriter


class Outcome(str, Enum):
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    FIXED = "fixed"
    READ_ERROR = "read-error"
    WRITE_ERROR = "write-error"


@dataclass
class FileRecord:
    """
    State of one matched file while it is processed.

    Contents are dropped once the outcome is known; nothing but the
    outcome survives into the next file.
    """

    path: str
    mode: int | None = None
    original: bytes | None = None
    tidied: bytes | None = None
    outcome: Outcome = Outcome.SKIPPED
    error: str | None = None

    def release(self) -> None:
        self.original = None
        self.tidied = None


@dataclass(frozen=True)
class WalkIssue:
    """A non-fatal error the walker hit on a single entry."""

    path: str
    message: str


@dataclass
class RunResult:
    records: list[FileRecord] = field(default_factory=list)
    walk_issues: list[WalkIssue] = field(default_factory=list)

    @property
    def counts(self) -> Counter[Outcome]:
        return Counter(r.outcome for r in self.records)

    @property
    def fixed(self) -> tuple[str, ...]:
        return tuple(r.path for r in self.records if r.outcome is Outcome.FIXED)

    @property
    def errors(self) -> tuple[FileRecord, ...]:
        return tuple(r for r in self.records if r.outcome in (Outcome.READ_ERROR, Outcome.WRITE_ERROR))


def _error_message(e: OSError) -> str:
    return e.strerror or str(e)


def write_preserving_mode(path: str, content: bytes, mode: int) -> None:
    """Overwrite `path` with `content` and keep its permission bits at `mode`."""
    with open(path, "wb") as f:
        f.write(content)
    if stat.S_IMODE(os.stat(path).st_mode) != mode:
        os.chmod(path, mode)


def iter_candidates(root: str, patterns: Sequence[str], options: Options) -> Iterator[str | WalkIssue]:
    """
    Walk `root` top-down and yield the paths of regular files whose base name
    matches one of `patterns`, interleaved with per-entry walk issues.

    - directories named in the excluded set are pruned, the root never is
    - siblings come in lexicographic order
    - symlinks are not followed, and a symlink to a file is not a regular file
    - an error on the root itself raises WalkError
    """
    excluded = options.effective_excluded_dirs
    root_abs = os.path.abspath(root)
    pending: list[WalkIssue] = []

    def on_error(e: OSError) -> None:
        failed = e.filename if e.filename is not None else root
        if os.path.abspath(failed) == root_abs:
            raise WalkError(f"Failed to walk filesystem: {e}", path=root) from e
        pending.append(WalkIssue(path=str(failed), message=_error_message(e)))

    def drain() -> Iterator[WalkIssue]:
        while pending:
            yield pending.pop(0)

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=on_error):
        yield from drain()

        # in-place so os.walk does not descend into pruned directories
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)

        for name in sorted(filenames):
            if not match_any_glob(name, patterns):
                continue
            path = os.path.join(dirpath, name)
            try:
                st = os.lstat(path)
            except OSError as e:
                yield WalkIssue(path=path, message=_error_message(e))
                continue
            if stat.S_ISREG(st.st_mode):
                yield path

    yield from drain()


class TidyEngine:
    """
    The traversal driver: walk, match, read, tidy and conditionally write.

    Single-threaded; each file is opened, read and closed before the next
    one is visited.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        options: Options | None = None,
        writer: FileLineWriter | None = None,
    ) -> None:
        self.patterns = tuple(patterns)
        self.options = options if options is not None else Options()
        self.writer = writer if writer is not None else FileLineWriter(verbose=self.options.verbose)

    def run(self, root: str) -> RunResult:
        result = RunResult()
        for item in iter_candidates(root, self.patterns, self.options):
            if isinstance(item, WalkIssue):
                result.walk_issues.append(item)
                self.writer.begin(item.path)
                self.writer.error(item.message)
                continue
            result.records.append(self.process_file(item))
        return result

    def process_file(self, path: str) -> FileRecord:
        record = FileRecord(path=path)
        self.writer.begin(path)

        try:
            record.original = Path(path).read_bytes()
        except OSError as e:
            record.outcome = Outcome.READ_ERROR
            record.error = _error_message(e)
            self.writer.error(record.error)
            return record

        record.tidied = tidy(record.original)

        if record.tidied == record.original:
            record.outcome = Outcome.UNCHANGED
            self.writer.unchanged()
            record.release()
            return record

        try:
            record.mode = stat.S_IMODE(os.stat(path).st_mode)
            write_preserving_mode(path, record.tidied, record.mode)
        except OSError as e:
            record.outcome = Outcome.WRITE_ERROR
            record.error = _error_message(e)
            self.writer.error(record.error)
        else:
            record.outcome = Outcome.FIXED
            self.writer.fixed()

        record.release()
        return record


def run_tidy(root: str, patterns: Sequence[str], options: Options | None = None) -> RunResult:
    return TidyEngine(patterns, options).run(root)
