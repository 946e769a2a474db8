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

# Tidy transform
from txtidy.core.tidy import UTF8_BOM, tidy

# Options
from txtidy.core.config import DEFAULT_EXCLUDED_DIRS, Options

# Matching
from txtidy.core.patterns import match_any_glob, match_glob, validate_pattern, validate_patterns

# Traversal
from txtidy.core.engine import FileRecord, Outcome, RunResult, TidyEngine, WalkIssue, run_tidy

# Errors
from txtidy.core.errors import ConfigError, PatternError, TxtidyError, WalkError

__all__ = [
    "ConfigError",
    "DEFAULT_EXCLUDED_DIRS",
    "FileRecord",
    "Options",
    "Outcome",
    "PatternError",
    "RunResult",
    "TidyEngine",
    "TxtidyError",
    "UTF8_BOM",
    "WalkError",
    "WalkIssue",
    "match_any_glob",
    "match_glob",
    "run_tidy",
    "tidy",
    "validate_pattern",
    "validate_patterns",
]
