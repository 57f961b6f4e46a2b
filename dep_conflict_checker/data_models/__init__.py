# dep_conflict_checker/data_models/__init__.py

# Expose the key data models at the package level
from .errors import ParseError
from .version import Version
from .specifier import Operator, Specifier
from .interval import Bound, VersionInterval
from .verdict import Verdict, CheckReport

__all__ = [
    "ParseError",
    "Version",
    "Operator",
    "Specifier",
    "Bound",
    "VersionInterval",
    "Verdict",
    "CheckReport",
]
