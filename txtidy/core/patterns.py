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

import fnmatch
from collections.abc import Iterable, Sequence

from txtidy.core.errors import PatternError

# Patterns are checked once against this name at startup.
VALIDATION_NAME = "dummy"


def validate_pattern(pattern: str) -> str:
    """
    Check a shell-style glob for syntax errors and return it unchanged.

    fnmatch never rejects a pattern (an unclosed '[' is matched literally),
    so bracket classes are checked here: every '[' must be closed by ']'.
    A ']' right after '[' or '[!' is a literal member of the class.
    Raises PatternError otherwise.
    """
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise PatternError(f"file pattern '{pattern}' is invalid.", pattern=pattern)
            i = j + 1
            continue
        i += 1

    match_glob(VALIDATION_NAME, pattern)
    return pattern


def validate_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    out = tuple(validate_pattern(p) for p in patterns)
    if not out:
        raise PatternError("no file pattern have been given.", code="no_patterns")
    return out


def match_glob(name: str, pattern: str) -> bool:
    """
    Glob match of a single file name component.
    - case-sensitive on every platform
    - '/' has no special meaning, so a pattern containing it never matches a base name
    """
    return fnmatch.fnmatchcase(name, pattern)


def match_any_glob(name: str, patterns: Sequence[str]) -> bool:
    return any(match_glob(name, p) for p in patterns)
