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

from dataclasses import dataclass

DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "bower_components",
    "vendor",
)


@dataclass(frozen=True)
class Options:
    verbose: bool = False
    visit_all: bool = False
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS

    @property
    def effective_excluded_dirs(self) -> frozenset[str]:
        """Directory base names whose subtrees are pruned (empty with visit_all)."""
        if self.visit_all:
            return frozenset()
        return frozenset(self.excluded_dirs)
