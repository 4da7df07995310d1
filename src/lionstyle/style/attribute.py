# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from .catalog import check_catalog

__all__ = ("ATTRIBUTE_CATALOG", "Attribute")


class Attribute(Enum):
    """Text-styling capabilities a terminal may support.

    Values are ordinals in declaration order. Each member owns the bit
    ``1 << (ordinal + 1)``; bit 0 is left unused.
    """

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINED = 4
    DOUBLE_UNDERLINED = 5
    UNDERCURLED = 6
    UNDERDOTTED = 7
    UNDERDASHED = 8
    SLOW_BLINK = 9
    RAPID_BLINK = 10
    REVERSE = 11
    HIDDEN = 12
    CROSSED_OUT = 13
    FRAKTUR = 14
    NO_BOLD = 15
    NORMAL_INTENSITY = 16
    NO_ITALIC = 17
    NO_UNDERLINE = 18
    NO_BLINK = 19
    NO_REVERSE = 20
    NO_HIDDEN = 21
    NOT_CROSSED_OUT = 22
    FRAMED = 23
    ENCIRCLED = 24
    OVER_LINED = 25
    NOT_FRAMED_OR_ENCIRCLED = 26
    NOT_OVER_LINED = 27

    @property
    def mask(self) -> int:
        """The single bit this attribute occupies."""
        return 1 << (self.value + 1)

    @classmethod
    def iterator(cls) -> Iterator[Attribute]:
        """All attributes in canonical (declaration) order."""
        return iter(cls)


# Import-time check: distinct single-bit masks inside a 32-bit word
ATTRIBUTE_CATALOG = check_catalog(Attribute.iterator())
