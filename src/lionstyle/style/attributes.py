# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Self

from .attribute import ATTRIBUTE_CATALOG, Attribute

__all__ = ("Attributes",)


def _mask_of(attribute: Attribute) -> int:
    if not isinstance(attribute, Attribute):
        raise TypeError(f"Expected Attribute, got {type(attribute).__name__}")
    return attribute.mask


def _bits_of(other: Attributes | Attribute) -> int:
    if isinstance(other, Attributes):
        return other._bits
    return _mask_of(other)


class Attributes:
    """Bitset of the styling attributes enabled for a piece of text.

    A plain value: copies never share state, and every bit that can be
    set comes from an `Attribute` mask.

    Usage:
        attrs = Attributes([Attribute.BOLD, Attribute.ITALIC])
        attrs.toggle(Attribute.BOLD)
        assert attrs == Attributes(Attribute.ITALIC)
    """

    __slots__ = ("_bits",)

    def __init__(self, attributes: Attribute | Iterable[Attribute] | None = None):
        """Build a set from nothing, one attribute, or many.

        Order and duplicates in ``attributes`` have no effect on the result.
        """
        self._bits = 0
        if attributes is None:
            return
        if isinstance(attributes, Attribute):
            self._bits = attributes.mask
            return
        for attribute in attributes:
            self.set(attribute)

    @classmethod
    def _from_bits(cls, bits: int) -> Self:
        obj = cls.__new__(cls)
        obj._bits = bits
        return obj

    @classmethod
    def none(cls) -> Self:
        """Return the empty set."""
        return cls._from_bits(0)

    @classmethod
    def all(cls) -> Self:
        """Return the set of every attribute in the catalog."""
        return cls._from_bits(ATTRIBUTE_CATALOG.full_mask)

    @property
    def bits(self) -> int:
        return self._bits

    # -- derived copies ------------------------------------------------------

    def with_(self, attribute: Attribute) -> Self:
        """Return a copy with ``attribute`` set.

        ``with`` is a keyword, hence the trailing underscore.
        """
        return self._from_bits(self._bits | _mask_of(attribute))

    def without(self, attribute: Attribute) -> Self:
        """Return a copy with ``attribute`` unset."""
        return self._from_bits(self._bits & ~_mask_of(attribute))

    def intersection(self, other: Attributes | Attribute) -> Self:
        """Attributes present in both sets. Same as ``self & other``."""
        return self._from_bits(self._bits & _bits_of(other))

    def union(self, other: Attributes | Attribute) -> Self:
        """Attributes present in either set. Same as ``self | other``."""
        return self._from_bits(self._bits | _bits_of(other))

    def difference(self, other: Attributes | Attribute) -> Self:
        """Attributes in ``self`` but not in ``other``. Same as ``self - other``."""
        return self._from_bits(self._bits & ~_bits_of(other))

    def symmetric_difference(self, other: Attributes | Attribute) -> Self:
        """Attributes in exactly one of the sets. Same as ``self ^ other``."""
        return self._from_bits(self._bits ^ _bits_of(other))

    def copy(self) -> Self:
        return self._from_bits(self._bits)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    # -- in-place mutation ---------------------------------------------------

    def set(self, attribute: Attribute) -> None:
        """Set ``attribute``. No-op if already set."""
        self._bits |= _mask_of(attribute)

    def unset(self, attribute: Attribute) -> None:
        """Unset ``attribute``. No-op if not set."""
        self._bits &= ~_mask_of(attribute)

    def toggle(self, attribute: Attribute) -> None:
        """Flip ``attribute``: set it if unset, unset it if set."""
        self._bits ^= _mask_of(attribute)

    def extend(self, other: Attributes | Attribute) -> None:
        """Set every attribute of ``other``. Removes none."""
        self._bits |= _bits_of(other)

    # -- queries -------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._bits == 0

    def has(self, attribute: Attribute) -> bool:
        return self._bits & _mask_of(attribute) != 0

    def intersects(self, other: Attributes | Attribute) -> bool:
        """True if the sets share at least one attribute."""
        return self._bits & _bits_of(other) != 0

    def contains(self, other: Attributes | Attribute) -> bool:
        """True if every attribute of ``other`` is also in ``self``."""
        bits = _bits_of(other)
        return self._bits & bits == bits

    def iter(self) -> Iterator[Attribute]:
        """Yield the attributes currently set, in catalog order.

        Each call walks the catalog again against a snapshot of the bits,
        so later mutation does not affect an iterator already handed out.
        """
        bits = self._bits
        return (a for a in Attribute.iterator() if bits & a.mask)

    # -- python protocols ----------------------------------------------------

    def __iter__(self) -> Iterator[Attribute]:
        return self.iter()

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __bool__(self) -> bool:
        return self._bits != 0

    def __contains__(self, attribute: object) -> bool:
        return isinstance(attribute, Attribute) and self.has(attribute)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._bits == other._bits

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return other.contains(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self.contains(other)

    def __and__(self, other: object) -> Self:
        if not isinstance(other, (Attributes, Attribute)):
            return NotImplemented
        return self.intersection(other)

    def __or__(self, other: object) -> Self:
        if not isinstance(other, (Attributes, Attribute)):
            return NotImplemented
        return self.union(other)

    def __xor__(self, other: object) -> Self:
        if not isinstance(other, (Attributes, Attribute)):
            return NotImplemented
        return self.symmetric_difference(other)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, (Attributes, Attribute)):
            return NotImplemented
        return self.difference(other)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __rsub__(self, other: object) -> Self:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._from_bits(other.mask & ~self._bits)

    def __repr__(self) -> str:
        members = ", ".join(f"Attribute.{a.name}" for a in self)
        return f"{type(self).__name__}([{members}])"
