from __future__ import annotations

from dataclasses import dataclass, field

from normalizer import normalize_code


@dataclass(frozen=True)
class CourseRecord:
    number: str
    title: str
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0


class Catalog:
    """
    In-memory course list, kept in file order.

    Built once per load and never edited afterwards. Duplicate course
    numbers are allowed to coexist; lookups return the first one.
    """

    def __init__(self, records=()):
        self._records: tuple[CourseRecord, ...] = tuple(records)

    @classmethod
    def empty(cls) -> "Catalog":
        return cls(())

    @property
    def records(self) -> tuple[CourseRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __bool__(self) -> bool:
        return len(self._records) > 0

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} courses)"

    def find(self, number: str) -> CourseRecord | None:
        """Exact match on the normalized number, in stored order. None if absent."""
        key = normalize_code(number)
        for record in self._records:
            if record.number == key:
                return record
        return None

    def sorted_records(self) -> list[CourseRecord]:
        """Snapshot ordered by course number; ties keep file order."""
        return sorted(self._records, key=lambda r: r.number)
