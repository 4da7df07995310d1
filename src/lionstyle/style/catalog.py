# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import CatalogError

__all__ = ("CatalogConfig", "CatalogReport", "check_catalog")

logger = logging.getLogger(__name__)


class MaskedMember(Protocol):
    """Anything a catalog enumerates: a named capability with one bit."""

    @property
    def name(self) -> str: ...

    @property
    def mask(self) -> int: ...


class CatalogConfig(BaseModel):
    """Limits a catalog must satisfy before sets are built from it."""

    model_config = ConfigDict(frozen=True)

    word_bits: int = Field(
        32,
        ge=1,
        le=64,
        description="Width of the word every mask must fit in",
    )

    @field_validator("word_bits", mode="before")
    def _reject_bool(cls, value):  # noqa: N805
        if isinstance(value, bool):
            raise ValueError("word_bits must be an integer, not a boolean.")
        return value


class CatalogReport(BaseModel):
    """Summary of a catalog that passed `check_catalog`."""

    model_config = ConfigDict(frozen=True)

    size: int
    full_mask: int
    word_bits: int

    @property
    def spare_bits(self) -> int:
        """High bits of the word no mask reaches."""
        return self.word_bits - self.full_mask.bit_length()


def _is_single_bit(mask: object) -> bool:
    return (
        isinstance(mask, int)
        and not isinstance(mask, bool)
        and mask > 0
        and mask & (mask - 1) == 0
    )


def check_catalog(
    catalog: Iterable[MaskedMember],
    config: CatalogConfig | None = None,
) -> CatalogReport:
    """Verify that a catalog assigns every member its own bit.

    Args:
        catalog: Canonical enumeration of the catalog members
        config: Word width limit (defaults to 32 bits)

    Returns:
        CatalogReport with the member count and the union of all masks

    Raises:
        CatalogError: A mask is not a power of two, does not fit the word,
            collides with another member's mask, or the catalog is empty
    """
    config = config or CatalogConfig()
    limit = 1 << config.word_bits
    owners: dict[int, str] = {}
    full_mask = 0

    for member in catalog:
        mask = member.mask
        if not _is_single_bit(mask):
            raise CatalogError(
                f"Mask of '{member.name}' is not a power of two",
                details={"member": member.name, "mask": mask},
            )
        if mask >= limit:
            raise CatalogError(
                f"Mask of '{member.name}' does not fit in {config.word_bits} bits",
                details={
                    "member": member.name,
                    "mask": mask,
                    "word_bits": config.word_bits,
                },
            )
        if mask in owners:
            raise CatalogError(
                f"'{member.name}' shares its bit with '{owners[mask]}'",
                details={"members": [owners[mask], member.name], "mask": mask},
            )
        owners[mask] = member.name
        full_mask |= mask

    if not owners:
        raise CatalogError("Catalog defines no members")

    report = CatalogReport(
        size=len(owners),
        full_mask=full_mask,
        word_bits=config.word_bits,
    )
    logger.debug(
        f"Checked catalog of {report.size} members, "
        f"full_mask={report.full_mask:#x}, spare_bits={report.spare_bits}"
    )
    return report
