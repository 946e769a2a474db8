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

"""
The tidy transform: a total, deterministic bytes -> bytes normalization.

Steps, in order:
  1. drop every carriage return (0x0D)
  2. drop one leading UTF-8 byte order mark
  3. drop trailing spaces and tabs at the end of every line
  4. drop leading and trailing Unicode whitespace of the whole buffer
  5. append exactly one line feed

No content sniffing is done; binary input is transformed like any other.
"""

UTF8_BOM = b"\xef\xbb\xbf"

_CR = b"\r"
_LF = b"\n"
_HORIZONTAL_WS = b" \t"

# Single-byte members of the Unicode White_Space property.
_ASCII_WS = frozenset(b"\t\n\x0b\x0c\r ")

# Non-ASCII White_Space code points (NEL, NBSP, OGHAM SPACE MARK, EN QUAD..HAIR SPACE,
# LINE/PARAGRAPH SEPARATOR, NARROW NBSP, MEDIUM MATHEMATICAL SPACE, IDEOGRAPHIC SPACE).
_WIDE_WS_CODEPOINTS = (
    0x0085,
    0x00A0,
    0x1680,
    *range(0x2000, 0x200B),
    0x2028,
    0x2029,
    0x202F,
    0x205F,
    0x3000,
)

# UTF-8 encodings of the above, grouped by encoded length.
_WIDE_WS: dict[int, frozenset[bytes]] = {}
for _cp in _WIDE_WS_CODEPOINTS:
    _encoded = chr(_cp).encode("utf-8")
    _WIDE_WS[len(_encoded)] = _WIDE_WS.get(len(_encoded), frozenset()) | {_encoded}
del _cp, _encoded


def tidy(content: bytes) -> bytes:
    content = content.replace(_CR, b"")
    content = strip_bom(content)
    content = trim_trailing_blanks(content)
    content = trim_space(content)
    return content + _LF


def strip_bom(content: bytes) -> bytes:
    """Remove a single leading UTF-8 BOM, if present."""
    if content.startswith(UTF8_BOM):
        return content[len(UTF8_BOM) :]
    return content


def trim_trailing_blanks(content: bytes) -> bytes:
    """
    Remove runs of spaces/tabs that sit right before a line feed or at the
    end of the buffer. Other whitespace (vertical tab, form feed, NBSP) is kept.
    """
    return _LF.join(line.rstrip(_HORIZONTAL_WS) for line in content.split(_LF))


def trim_space(content: bytes) -> bytes:
    """Remove leading and trailing Unicode whitespace from the whole buffer."""
    start = 0
    end = len(content)

    while start < end:
        width = _whitespace_width_at(content, start, end)
        if not width:
            break
        start += width

    while end > start:
        width = _whitespace_width_before(content, start, end)
        if not width:
            break
        end -= width

    return content[start:end]


def _whitespace_width_at(content: bytes, pos: int, end: int) -> int:
    if content[pos] in _ASCII_WS:
        return 1
    for width, encodings in _WIDE_WS.items():
        if pos + width <= end and content[pos : pos + width] in encodings:
            return width
    return 0


def _whitespace_width_before(content: bytes, start: int, end: int) -> int:
    if content[end - 1] in _ASCII_WS:
        return 1
    for width, encodings in _WIDE_WS.items():
        if end - width >= start and content[end - width : end] in encodings:
            return width
    return 0
