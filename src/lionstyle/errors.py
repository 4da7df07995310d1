# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from lionherd_core.errors import LionherdError

__all__ = ("CatalogError", "LionstyleError")


class LionstyleError(LionherdError):
    """Base exception for lionstyle."""

    default_message = "lionstyle error"


class CatalogError(LionstyleError):
    """Raised when an attribute catalog breaks the bitmask contract.

    Masks must be distinct powers of two that fit in the configured word.
    """

    default_message = "Invalid attribute catalog"
