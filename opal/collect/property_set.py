"""PropertySet — an immutable, ordered map of key to one or more values.

Typically built from the key-value lines of an INI section or a properties
file. Keys keep their first-insertion order and each key keeps its values in
insertion order, duplicates included.

Equality ignores the relative order of keys but not the order of values
within a key, matching the usual multimap contract. Hashing follows the same
rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, KeysView, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, final

from opal.collect._validation import invalid, require_not_none, require_str
from opal.collect.errors import ArgumentError, ErrorCode
from opal.collect.result import Err, Ok

logger = logging.getLogger(__name__)

type _Entries = tuple[tuple[str, tuple[str, ...]], ...]


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class PropertySet:
    """A map of key-value properties where a key may carry several values.

    Build instances with ``of`` or ``of_multi``; the constructor takes the
    already-grouped entries and is internal.
    """

    _entries: _Entries
    _index: dict[str, tuple[str, ...]] = field(init=False, repr=False)

    EMPTY: ClassVar[PropertySet]  # Assigned after class definition

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, values in self._entries:
            if key in seen:
                raise TypeError(f"PropertySet: duplicate key {key!r} in entries")
            if not values:
                raise TypeError(f"PropertySet: key {key!r} has no values")
            seen.add(key)
        object.__setattr__(self, "_index", dict(self._entries))

    # -- construction -------------------------------------------------------

    @staticmethod
    def of(key_values: Mapping[str, str]) -> PropertySet:
        """Create a property set with exactly one value per key.

        Iteration order of the result matches that of ``key_values``.
        """
        require_not_none(key_values, "key_values")
        if not isinstance(key_values, Mapping):
            raise invalid(
                f"Argument 'key_values' must be a mapping, got {type(key_values).__name__}",
                ErrorCode.INVALID_VALUE,
                "key_values",
            )
        entries = tuple(
            (require_str(k, "key"), (require_str(v, "value"),))
            for k, v in key_values.items()
        )
        return PropertySet(_entries=entries) if entries else PropertySet.EMPTY

    @staticmethod
    def of_multi(
        key_values: Mapping[str, Iterable[str]] | Iterable[tuple[str, str]],
    ) -> PropertySet:
        """Create a property set that may hold several values per key.

        Accepts a mapping of key to value list, or (key, value) pairs. With
        pairs, a repeated key collects its values under its first position.
        A mapping entry with no values adds no key.
        """
        require_not_none(key_values, "key_values")
        grouped: dict[str, list[str]] = {}
        if isinstance(key_values, Mapping):
            for k, vs in key_values.items():
                key = require_str(k, "key")
                require_not_none(vs, "values")
                if isinstance(vs, str):
                    raise invalid(
                        f"Values for key '{key}' must be a collection of str, not a str",
                        ErrorCode.INVALID_VALUE,
                        "values",
                    )
                for v in vs:
                    grouped.setdefault(key, []).append(require_str(v, "value"))
        else:
            if isinstance(key_values, str) or not isinstance(key_values, Iterable):
                raise invalid(
                    "Argument 'key_values' must be a mapping or (key, value) pairs, "
                    f"got {type(key_values).__name__}",
                    ErrorCode.INVALID_VALUE,
                    "key_values",
                )
            for pair in key_values:
                if not isinstance(pair, tuple) or len(pair) != 2:
                    raise invalid(
                        f"Expected a (key, value) pair, got {pair!r}",
                        ErrorCode.INVALID_VALUE,
                        "key_values",
                    )
                k, v = pair
                grouped.setdefault(require_str(k, "key"), []).append(require_str(v, "value"))
        if not grouped:
            return PropertySet.EMPTY
        return PropertySet(_entries=tuple((k, tuple(vs)) for k, vs in grouped.items()))

    @staticmethod
    def layered(*property_sets: PropertySet) -> PropertySet:
        """Combine sources base-first; each later set overrides the earlier ones."""
        result = PropertySet.EMPTY
        for ps in property_sets:
            result = result.combined_with(ps)
        return result

    # -- queries --------------------------------------------------------------

    def keys(self) -> KeysView[str]:
        """Return the distinct keys, in the order of the input data."""
        return self._index.keys()

    def as_map(self) -> Mapping[str, tuple[str, ...]]:
        """Return a read-only view of key to values, in the order of the input data."""
        return MappingProxyType(self._index)

    def is_empty(self) -> bool:
        return not self._entries

    def contains(self, key: str) -> bool:
        require_str(key, "key")
        return key in self._index

    def get_value(self, key: str) -> str:
        """Return the single value associated with ``key``.

        Raises InvalidArgumentError with code UNKNOWN_KEY if the key has no
        value, or MULTIPLE_VALUES if it has more than one.
        """
        return self.find_value(key).unwrap()

    def find_value(self, key: str) -> Ok[str] | Err[ArgumentError]:
        """Like get_value, but returns Err for an unknown or multi-valued key.

        A None key is a programming error and still raises.
        """
        values = self.get_value_list(key)
        if not values:
            return Err(ArgumentError(f"Unknown key: {key}", ErrorCode.UNKNOWN_KEY, "key"))
        if len(values) > 1:
            return Err(ArgumentError(
                f"Multiple values for key: {key}", ErrorCode.MULTIPLE_VALUES, "key",
            ))
        return Ok(values[0])

    def get_value_list(self, key: str) -> tuple[str, ...]:
        """Return every value associated with ``key``, or () if there are none."""
        require_str(key, "key")
        return self._index.get(key, ())

    # -- merge ----------------------------------------------------------------

    def combined_with(self, other: PropertySet) -> PropertySet:
        """Combine this property set with another; ``other`` takes precedence.

        For a key present in both, the result holds only ``other``'s values,
        at this set's position for the key. Keys found only in ``other`` are
        appended in ``other``'s order.
        """
        require_not_none(other, "other")
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        overrides = dict(other._entries)
        replaced = [k for k, _ in self._entries if k in overrides]
        if replaced:
            logger.debug("Property keys overridden by combined set: %s", replaced)
        merged = [(k, overrides.pop(k, vs)) for k, vs in self._entries]
        merged.extend(overrides.items())
        return PropertySet(_entries=tuple(merged))

    # -- Python protocols -----------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return (k for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if isinstance(other, PropertySet):
            return self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries))

    def __repr__(self) -> str:
        content = {k: list(vs) for k, vs in self._entries}
        return f"PropertySet({content!r})"


PropertySet.EMPTY = PropertySet(_entries=())
