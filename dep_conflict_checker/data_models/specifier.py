# dep_conflict_checker/data_models/specifier.py
from dataclasses import dataclass, field
from enum import Enum

from packaging.utils import canonicalize_name

from dep_conflict_checker.data_models.version import Version


class Operator(str, Enum):
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    EQUAL = "=="
    COMPATIBLE = "~="
    LESS = "<"
    GREATER = ">"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Specifier:
    package_name: str
    operator: Operator
    version: Version
    # Trimmed input as the user wrote it; empty when built directly
    text: str = field(default="", compare=False)

    @property
    def display(self) -> str:
        return self.text or str(self)

    @property
    def normalized_name(self) -> str:
        return canonicalize_name(self.package_name)

    def __str__(self):
        return f"{self.package_name}{self.operator.value}{self.version}"
