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

from collections.abc import Mapping
from typing import Any


class TxtidyError(Exception):
    """
    Base class for all txtidy errors.

    These are surfaced to users as a single diagnostic line and a non-zero
    exit code, never as a traceback.
    """

    code: str
    message: str
    path: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "txtidy_error",
        path: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigError(TxtidyError):
    """Raised when the root directory, patterns or config file are unusable."""

    def __init__(self, message: str, code: str = "config_error", **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)


class PatternError(ConfigError):
    """Raised when a file pattern is syntactically invalid."""

    pattern: str | None

    def __init__(self, message: str, code: str = "invalid_pattern", pattern: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)
        self.pattern = pattern


class WalkError(TxtidyError):
    """Raised when the directory walk cannot continue at all."""

    def __init__(self, message: str, code: str = "walk_failed", **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)
