from __future__ import annotations

from dataclasses import dataclass, field

"""ColumnRoleMap model.

Built once per extraction call from the header row and passed read-only into
every row-processing call. Never recomputed per row.
"""

__all__ = [
    "ColumnRoleMap",
]


@dataclass(frozen=True)
class ColumnRoleMap:
    """Which column indices are medley slot columns.

    medley_slots is kept in ascending column order; that order is the order
    medley songs are emitted in.
    """
    medley_slots: tuple[int, ...] = ()
    _slot_set: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "medley_slots", tuple(sorted(set(self.medley_slots))))
        object.__setattr__(self, "_slot_set", frozenset(self.medley_slots))

    def is_medley_slot(self, index: int) -> bool:
        return index in self._slot_set

    def __len__(self) -> int:
        return len(self.medley_slots)

    def __bool__(self) -> bool:
        return bool(self.medley_slots)
