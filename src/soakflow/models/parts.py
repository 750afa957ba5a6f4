"""Modifier parts: named, keyed, summable contributions to a total.

A parts list holds at most one part per name. Adding a part under an
existing name replaces its value in place, so the list's order stays
stable for display while the total always reflects the latest values.

Example:
    >>> parts = PartsList()
    >>> parts.add_unique_part("SR5.Body", 5)
    >>> parts.add_unique_part("SR5.Armor", 12)
    >>> parts.add_unique_part("SR5.Body", 6)
    >>> parts.total
    18
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ModifierPart(BaseModel):
    """A single named contribution.

    Attributes:
        name: Label of the part (usually a translation key).
        value: Numeric contribution.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(
        validation_alias=AliasChoices("name", "key"),
        description="Part label",
    )
    value: int = Field(default=0, description="Contribution to the total")


PartsInput = Iterable[ModifierPart | dict]


def _copy_parts(parts: PartsInput | None) -> list[ModifierPart]:
    """Deep copy parts, accepting models or plain mappings."""
    copied: list[ModifierPart] = []
    for part in parts or []:
        if isinstance(part, ModifierPart):
            copied.append(part.model_copy(deep=True))
        else:
            copied.append(ModifierPart.model_validate(part))
    return copied


def parts_total(parts: Iterable[ModifierPart]) -> int:
    """Sum all part values.

    Args:
        parts: Parts to sum.

    Returns:
        Total of all values, 0 for an empty list.
    """
    return sum(part.value for part in parts)


def add_unique_part(
    parts: PartsInput | None,
    name: str,
    value: int,
    *,
    overwrite: bool = True,
) -> list[ModifierPart]:
    """Upsert a part and return the resulting list.

    The input is never mutated; callers must use the returned list.

    Args:
        parts: Existing parts.
        name: Label of the part to add or replace.
        value: New value.
        overwrite: If False, an existing part keeps its value.

    Returns:
        A new list holding the upserted part.
    """
    parts_list = PartsList(parts)
    parts_list.add_unique_part(name, value, overwrite=overwrite)
    return parts_list.list


class PartsList:
    """Ordered, keyed accumulator of modifier parts.

    The constructor deep copies its input, so a PartsList never aliases the
    parts it was built from.
    """

    def __init__(self, parts: PartsInput | None = None) -> None:
        self._list: list[ModifierPart] = []
        for part in _copy_parts(parts):
            self.add_unique_part(part.name, part.value)

    @property
    def list(self) -> list[ModifierPart]:
        """Deep copy of the parts in insertion order."""
        return _copy_parts(self._list)

    @property
    def total(self) -> int:
        """Sum of all part values."""
        return parts_total(self._list)

    @property
    def is_empty(self) -> bool:
        """Whether the list holds no parts."""
        return not self._list

    def add_unique_part(self, name: str, value: int, *, overwrite: bool = True) -> None:
        """Add a part or replace the value of the part with the same name.

        Args:
            name: Part label.
            value: Part value.
            overwrite: If False, an existing part keeps its value.
        """
        for part in self._list:
            if part.name == name:
                if overwrite:
                    part.value = value
                return
        self._list.append(ModifierPart(name=name, value=value))

    def get_part_value(self, name: str) -> int | None:
        """Return the value of a named part, or None if absent."""
        for part in self._list:
            if part.name == name:
                return part.value
        return None

    def remove_part(self, name: str) -> bool:
        """Remove a named part.

        Returns:
            True if a part was removed.
        """
        before = len(self._list)
        self._list = [part for part in self._list if part.name != name]
        return len(self._list) != before

    def clear(self) -> None:
        self._list.clear()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[ModifierPart]:
        return iter(self.list)

    def __contains__(self, name: object) -> bool:
        return any(part.name == name for part in self._list)

    def __repr__(self) -> str:
        inner = ", ".join(f"{p.name}={p.value}" for p in self._list)
        return f"PartsList([{inner}], total={self.total})"


__all__ = [
    "ModifierPart",
    "PartsList",
    "add_unique_part",
    "parts_total",
]
