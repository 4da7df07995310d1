# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Styling capabilities and the bitset tracking which ones are enabled."""

from .attribute import ATTRIBUTE_CATALOG, Attribute
from .attributes import Attributes
from .catalog import CatalogConfig, CatalogReport, check_catalog

__all__ = (
    "ATTRIBUTE_CATALOG",
    "Attribute",
    "Attributes",
    "CatalogConfig",
    "CatalogReport",
    "check_catalog",
)
