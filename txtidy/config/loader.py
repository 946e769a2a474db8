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

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from txtidy.core.config import DEFAULT_EXCLUDED_DIRS, Options
from txtidy.core.errors import ConfigError

_KNOWN_KEYS = frozenset({"patterns", "exclude_dirs", "extra_exclude_dirs", "all", "verbose"})


@dataclass(frozen=True)
class ProjectConfig:
    """Settings read from a project config file. None means "not set"."""

    patterns: tuple[str, ...] | None = None
    exclude_dirs: tuple[str, ...] | None = None
    extra_exclude_dirs: tuple[str, ...] = ()
    visit_all: bool | None = None
    verbose: bool | None = None
    source: Path | None = None

    def to_options(
        self,
        *,
        verbose: bool = False,
        visit_all: bool = False,
        extra_exclude_dirs: Sequence[str] = (),
    ) -> Options:
        """Merge command-line flags over this config. Boolean flags are OR-ed."""
        base = self.exclude_dirs if self.exclude_dirs is not None else DEFAULT_EXCLUDED_DIRS
        excluded: list[str] = []
        for name in (*base, *self.extra_exclude_dirs, *extra_exclude_dirs):
            if name not in excluded:
                excluded.append(name)

        return Options(
            verbose=verbose or bool(self.verbose),
            visit_all=visit_all or bool(self.visit_all),
            excluded_dirs=tuple(excluded),
        )


class ProjectConfigLoader:
    """
    Loads a ProjectConfig from a YAML (.yaml / .yml) or JSON (.json) file
    """

    def load(self, path: str | Path) -> ProjectConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.is_file():
            raise ConfigError(f"config file '{path}' could not be found.", code="config_not_found", path=str(path))

        data = self._read_config_file(path)

        if data is None:
            return ProjectConfig(source=path)

        if not isinstance(data, dict):
            raise ConfigError(f"config file '{path}' must contain a mapping.", code="invalid_config", path=str(path))

        unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
        if unknown:
            raise ConfigError(
                f"config file '{path}' has unknown keys: {', '.join(unknown)}",
                code="unknown_config_keys",
                path=str(path),
                details={"keys": unknown},
            )

        return ProjectConfig(
            patterns=self._parse_names(data, "patterns", path),
            exclude_dirs=self._parse_names(data, "exclude_dirs", path),
            extra_exclude_dirs=self._parse_names(data, "extra_exclude_dirs", path) or (),
            visit_all=self._parse_bool(data, "all", path),
            verbose=self._parse_bool(data, "verbose", path),
            source=path,
        )

    def _read_config_file(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"could not read config file '{path}': {e}", code="config_unreadable", path=str(path)) from e

        try:
            if path.suffix.lower() == ".json":
                return json.loads(raw)
            return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"config file '{path}' is malformed: {e}", code="config_malformed", path=str(path)) from e

    def _parse_names(self, data: dict[str, Any], key: str, path: Path) -> tuple[str, ...] | None:
        raw = data.get(key)
        if raw is None:
            return None
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
            raise ConfigError(f"'{key}' in '{path}' must be a list of strings.", code="invalid_config", path=str(path))
        return tuple(raw)

    def _parse_bool(self, data: dict[str, Any], key: str, path: Path) -> bool | None:
        raw = data.get(key)
        if raw is None:
            return None
        if not isinstance(raw, bool):
            raise ConfigError(f"'{key}' in '{path}' must be true or false.", code="invalid_config", path=str(path))
        return raw
