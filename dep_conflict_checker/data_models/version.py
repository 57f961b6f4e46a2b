# dep_conflict_checker/data_models/version.py
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from dep_conflict_checker.data_models.errors import ParseError

_SEGMENT_RE = re.compile(r"[0-9]+")


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """
    A release version made only of non-negative integer components.

    Missing trailing components compare as zero, so ``2.0`` and ``2.0.0``
    are equal and hash the same.
    """
    release: Tuple[int, ...]

    def __post_init__(self):
        if not self.release:
            raise ValueError("Version needs at least one component.")
        if any(not isinstance(c, int) or c < 0 for c in self.release):
            raise ValueError(f"Version components must be non-negative integers: {self.release}")

    @classmethod
    def parse(cls, text: str) -> "Version":
        version_str = text.strip()
        if not version_str:
            raise ParseError(text, "version is empty")
        segments = version_str.split(".")
        for segment in segments:
            if not _SEGMENT_RE.fullmatch(segment):
                raise ParseError(text, f"version segment '{segment}' is not a number")
        try:
            release = tuple(int(s) for s in segments)
        except ValueError as e:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise ParseError(text, f"version segment is too long: {e}") from e
        return cls(release)

    def _key(self) -> Tuple[int, ...]:
        key = list(self.release)
        while len(key) > 1 and key[-1] == 0:
            key.pop()
        return tuple(key)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return ".".join(str(c) for c in self.release)

    def bump_for_compatible_release(self) -> "Version":
        # ~=2.1.3 -> 2.2, ~=2.1 -> 3
        if len(self.release) < 2:
            raise ValueError(f"Compatible release needs at least two components, got '{self}'.")
        head = list(self.release[:-1])
        head[-1] += 1
        return Version(tuple(head))
