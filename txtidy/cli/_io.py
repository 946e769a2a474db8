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
from pathlib import Path

from txtidy.core.errors import ConfigError


def resolve_root_dir(path: str | None) -> str:
    """
    Turn the --dir value (or the working directory) into an absolute path
    of an existing directory.
    """
    if not path:
        try:
            path = os.getcwd()
        except OSError as e:
            raise ConfigError(f"could not determine current working directory: {e}", code="no_cwd") from e

    try:
        root = os.path.abspath(path)
    except (OSError, ValueError) as e:
        raise ConfigError(f"could not determine absolute path for '{path}': {e}", code="bad_root", path=path) from e

    if not Path(root).is_dir():
        raise ConfigError(f"the given root directory '{root}' could not be found.", code="root_not_found", path=root)

    return root
