# dep_conflict_checker/data_models/interval.py
from dataclasses import dataclass
from typing import Optional

from dep_conflict_checker.data_models.version import Version


@dataclass(frozen=True)
class Bound:
    version: Version
    inclusive: bool


def _tighter_lower(a: Optional[Bound], b: Optional[Bound]) -> Optional[Bound]:
    if a is None:
        return b
    if b is None:
        return a
    if a.version != b.version:
        return a if a.version > b.version else b
    # Same version: the exclusive bound admits less
    return a if not a.inclusive else b


def _tighter_upper(a: Optional[Bound], b: Optional[Bound]) -> Optional[Bound]:
    if a is None:
        return b
    if b is None:
        return a
    if a.version != b.version:
        return a if a.version < b.version else b
    return a if not a.inclusive else b


@dataclass(frozen=True)
class VersionInterval:
    """A range of versions; a missing bound is unbounded on that side."""
    lower: Optional[Bound] = None
    upper: Optional[Bound] = None

    def intersect(self, other: "VersionInterval") -> "VersionInterval":
        return VersionInterval(
            lower=_tighter_lower(self.lower, other.lower),
            upper=_tighter_upper(self.upper, other.upper),
        )

    def is_empty(self) -> bool:
        if self.lower is None or self.upper is None:
            return False
        if self.lower.version > self.upper.version:
            return True
        if self.lower.version == self.upper.version:
            return not (self.lower.inclusive and self.upper.inclusive)
        return False

    def contains(self, version: Version) -> bool:
        """Membership test for a single version; agrees with is_empty() on the bounds."""
        if self.lower is not None:
            if version < self.lower.version:
                return False
            if version == self.lower.version and not self.lower.inclusive:
                return False
        if self.upper is not None:
            if version > self.upper.version:
                return False
            if version == self.upper.version and not self.upper.inclusive:
                return False
        return True

    def __str__(self):
        if self.is_empty():
            return "<empty>"
        if self.lower is None and self.upper is None:
            return "*"
        if self.lower is not None and self.upper is not None and self.lower.version == self.upper.version:
            return f"=={self.lower.version}"
        parts = []
        if self.lower is not None:
            parts.append(f"{'>=' if self.lower.inclusive else '>'}{self.lower.version}")
        if self.upper is not None:
            parts.append(f"{'<=' if self.upper.inclusive else '<'}{self.upper.version}")
        return ", ".join(parts)
