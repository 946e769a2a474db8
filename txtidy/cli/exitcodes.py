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

EXIT_OK = 0
# configuration or environment problem detected before any file is touched
EXIT_CONFIG_ERROR = 1
# the walk itself failed, e.g. the root directory went away
EXIT_WALK_ERROR = 1
