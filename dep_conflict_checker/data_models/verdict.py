# dep_conflict_checker/data_models/verdict.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Verdict(str, Enum):
    COMPATIBLE = "compatible"
    CONFLICT = "conflict"
    NOT_COMPARABLE = "not_comparable"


class CheckReport(BaseModel):
    """Structured outcome of comparing two specifiers, used for --json output."""
    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    pkg1: str = Field(description="First specifier as the user wrote it, e.g. 'requests>=2.0.0'.")
    pkg2: str = Field(description="Second specifier as the user wrote it.")
    package: Optional[str] = Field(None, description="Normalized package name when both specifiers share it.")
    satisfying_range: Optional[str] = Field(
        None, description="Versions allowed by both specifiers (e.g. '>=2.0.0, <3.0.0'); null on conflict."
    )

    def summary_line(self) -> str:
        if self.verdict is Verdict.COMPATIBLE:
            return f"Compatible: {self.pkg1} and {self.pkg2} can both be satisfied"
        if self.verdict is Verdict.CONFLICT:
            return f"Conflict: {self.pkg1} and {self.pkg2} cannot both be satisfied"
        return f"Not comparable: {self.pkg1} and {self.pkg2} constrain different packages"
