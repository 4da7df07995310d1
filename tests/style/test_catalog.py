# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Attribute catalog and its bitmask contract.

Test Surface:
    - Attribute masks (distinct single bits inside 32 bits)
    - Attribute.iterator (canonical, restartable order)
    - CatalogConfig validation
    - check_catalog (success report, every failure mode, logging)
    - CatalogError / LionstyleError payloads
"""

from __future__ import annotations

import logging
from enum import Enum

import pytest
from lionherd_core.errors import LionherdError
from pydantic import ValidationError

from lionstyle import (
    ATTRIBUTE_CATALOG,
    Attribute,
    CatalogConfig,
    CatalogError,
    CatalogReport,
    LionstyleError,
    check_catalog,
)

# =============================================================================
# Test Helpers
# =============================================================================


class _Member:
    """Minimal catalog member with an arbitrary mask."""

    def __init__(self, name: str, mask: object):
        self.name = name
        self.mask = mask


class Tiny(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2

    @property
    def mask(self) -> int:
        return 1 << self.value


# =============================================================================
# Attribute
# =============================================================================


class TestAttribute:
    def test_masks_are_distinct_single_bits(self):
        masks = [attribute.mask for attribute in Attribute]
        assert len(set(masks)) == len(masks)
        for mask in masks:
            assert mask > 0
            assert mask & (mask - 1) == 0

    def test_masks_fit_in_32_bits(self):
        assert all(attribute.mask < 1 << 32 for attribute in Attribute)

    def test_bit_zero_unused(self):
        assert Attribute.RESET.mask == 0b10
        assert not any(attribute.mask & 1 for attribute in Attribute)

    def test_iterator_is_canonical_and_restartable(self):
        first = list(Attribute.iterator())
        second = list(Attribute.iterator())
        assert first == second == list(Attribute)
        assert first[0] is Attribute.RESET
        assert first[-1] is Attribute.NOT_OVER_LINED
        assert [a.value for a in first] == list(range(len(first)))

    def test_catalog_report(self):
        assert ATTRIBUTE_CATALOG.size == len(Attribute) == 28
        assert ATTRIBUTE_CATALOG.word_bits == 32
        assert ATTRIBUTE_CATALOG.full_mask == sum(a.mask for a in Attribute)
        assert ATTRIBUTE_CATALOG.spare_bits == 3


# =============================================================================
# CatalogConfig
# =============================================================================


class TestCatalogConfig:
    def test_defaults(self):
        assert CatalogConfig().word_bits == 32

    @pytest.mark.parametrize("word_bits", [1, 8, 16, 64])
    def test_accepts_valid_widths(self, word_bits):
        assert CatalogConfig(word_bits=word_bits).word_bits == word_bits

    @pytest.mark.parametrize("word_bits", [0, -1, 65, True])
    def test_rejects_invalid_widths(self, word_bits):
        with pytest.raises(ValidationError):
            CatalogConfig(word_bits=word_bits)

    def test_frozen(self):
        config = CatalogConfig()
        with pytest.raises(ValidationError):
            config.word_bits = 8


# =============================================================================
# check_catalog
# =============================================================================


class TestCheckCatalog:
    def test_valid_enum_catalog(self):
        report = check_catalog(Tiny)
        assert isinstance(report, CatalogReport)
        assert report.size == 3
        assert report.full_mask == 0b111
        assert report.spare_bits == 29

    def test_respects_word_bits(self):
        report = check_catalog(Tiny, CatalogConfig(word_bits=3))
        assert report.spare_bits == 0

        with pytest.raises(CatalogError) as exc_info:
            check_catalog(Tiny, CatalogConfig(word_bits=2))
        assert exc_info.value.details == {"member": "BLUE", "mask": 4, "word_bits": 2}

    def test_attribute_catalog_needs_29_bits(self):
        check_catalog(Attribute, CatalogConfig(word_bits=29))
        with pytest.raises(CatalogError):
            check_catalog(Attribute, CatalogConfig(word_bits=28))

    def test_collision(self):
        catalog = [_Member("a", 1), _Member("b", 2), _Member("c", 2)]
        with pytest.raises(CatalogError) as exc_info:
            check_catalog(catalog)
        assert "'c' shares its bit with 'b'" in exc_info.value.message
        assert exc_info.value.details == {"members": ["b", "c"], "mask": 2}

    @pytest.mark.parametrize("mask", [0, -2, 3, 6, 2.0, "1", True])
    def test_not_single_bit(self, mask):
        with pytest.raises(CatalogError) as exc_info:
            check_catalog([_Member("bad", mask)])
        assert "power of two" in exc_info.value.message
        assert exc_info.value.details["member"] == "bad"

    def test_empty_catalog(self):
        with pytest.raises(CatalogError) as exc_info:
            check_catalog([])
        assert "no members" in exc_info.value.message

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lionstyle.style.catalog"):
            check_catalog(Tiny)
        assert "3 members" in caplog.text


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    def test_catalog_error_hierarchy(self):
        assert issubclass(CatalogError, LionstyleError)
        assert issubclass(LionstyleError, LionherdError)

    def test_default_message(self):
        error = CatalogError()
        assert error.message == "Invalid attribute catalog"
        assert error.details == {}

    def test_details_preserved(self):
        error = CatalogError("boom", details={"mask": 3})
        assert error.message == "boom"
        assert error.details == {"mask": 3}

    def test_to_dict(self):
        payload = CatalogError("boom", details={"mask": 3}).to_dict()
        assert payload["error"] == "CatalogError"
        assert payload["message"] == "boom"
        assert "retryable" in payload

    def test_raised_error_serializes(self):
        with pytest.raises(CatalogError) as exc_info:
            check_catalog([_Member("a", 1), _Member("b", 1)])
        payload = exc_info.value.to_dict()
        assert payload["error"] == "CatalogError"
        assert "shares its bit" in payload["message"]
