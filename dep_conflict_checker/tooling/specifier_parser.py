# dep_conflict_checker/tooling/specifier_parser.py
import re

from dep_conflict_checker.data_models.errors import ParseError
from dep_conflict_checker.data_models.specifier import Operator, Specifier
from dep_conflict_checker.data_models.version import Version
from dep_conflict_checker.utils.logger import log_verbose

# Alternation order matters: re tries left to right at each position, so the
# two-character operators win over '<' and '>' at the earliest match.
_OPERATOR_RE = re.compile(r">=|<=|==|~=|<|>")

# PEP 508 project name
_NAME_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?")


class SpecifierParser:
    """
    Parses strings such as ``requests>=2.0.0`` into a Specifier.

    The first operator found is authoritative; package names that contain
    operator characters are not supported.
    """

    def parse(self, raw: str) -> Specifier:
        match = _OPERATOR_RE.search(raw)
        if not match:
            raise ParseError(raw, "no version operator found (expected one of >=, <=, ==, ~=, <, >)")

        name = raw[:match.start()].strip()
        operator = Operator(match.group(0))
        version_part = raw[match.end():]

        if not name:
            raise ParseError(raw, "package name is empty")
        if not _NAME_RE.fullmatch(name):
            raise ParseError(raw, f"'{name}' is not a valid package name")

        try:
            version = Version.parse(version_part)
        except ParseError as e:
            raise ParseError(raw, e.reason) from e

        if operator is Operator.COMPATIBLE and len(version.release) < 2:
            raise ParseError(raw, "~= needs a version with at least two components (e.g. ~=2.1)")

        specifier = Specifier(package_name=name, operator=operator, version=version, text=raw.strip())
        log_verbose(f"[SpecifierParser] '{raw}' -> name={name}, operator={operator.value}, version={version.release}")
        return specifier
