# dep_conflict_checker/data_models/errors.py


class ParseError(ValueError):
    """Raised when a specifier or version string is malformed."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"'{raw}': {reason}")
