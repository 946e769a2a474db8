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

import argparse
import sys

from txtidy._version import version_line
from txtidy.cli._io import resolve_root_dir
from txtidy.cli.exitcodes import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_WALK_ERROR
from txtidy.config.loader import ProjectConfig, ProjectConfigLoader
from txtidy.core.config import DEFAULT_EXCLUDED_DIRS
from txtidy.core.engine import TidyEngine
from txtidy.core.errors import ConfigError, WalkError
from txtidy.core.patterns import validate_patterns


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="txtidy",
        description="Normalize whitespace and line endings of matching files in a directory tree.",
    )
    p.add_argument("patterns", nargs="*", metavar="PATTERN", help="File name glob, e.g. '*.txt' (repeatable).")
    p.add_argument("-d", "--dir", default=None, help="Root directory to search files in (default: cwd).")
    p.add_argument("-v", "--verbose", action="store_true", help="Print all visited files, not only modified ones.")
    p.add_argument(
        "-a",
        "--all",
        dest="visit_all",
        action="store_true",
        help=f"Run on all files, i.e. do not exclude {list(DEFAULT_EXCLUDED_DIRS)}.",
    )
    p.add_argument("-V", "--version", action="store_true", help="Show version info and exit immediately.")
    p.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML or JSON file with default patterns and exclusions.",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional directory name to skip (repeatable).",
    )
    return p


def _load_project_config(config: str | None) -> ProjectConfig:
    # only an explicitly named file may change the defaults
    if config is None:
        return ProjectConfig()
    return ProjectConfigLoader().load(config)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(version_line())
        return EXIT_OK

    try:
        root = resolve_root_dir(args.dir)
        project = _load_project_config(args.config)

        raw_patterns = args.patterns or project.patterns or ()
        if not raw_patterns:
            parser.print_usage(sys.stderr)
        patterns = validate_patterns(raw_patterns)

        options = project.to_options(
            verbose=args.verbose,
            visit_all=args.visit_all,
            extra_exclude_dirs=args.exclude,
        )

        TidyEngine(patterns, options).run(root)

    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except WalkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WALK_ERROR
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WALK_ERROR

    return EXIT_OK


def run() -> None:
    sys.exit(main())
