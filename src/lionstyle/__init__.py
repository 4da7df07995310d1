# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Text-styling attribute sets."""

from .errors import CatalogError, LionstyleError
from .style import (
    ATTRIBUTE_CATALOG,
    Attribute,
    Attributes,
    CatalogConfig,
    CatalogReport,
    check_catalog,
)

__all__ = (
    "ATTRIBUTE_CATALOG",
    "Attribute",
    "Attributes",
    "CatalogConfig",
    "CatalogError",
    "CatalogReport",
    "LionstyleError",
    "check_catalog",
)
