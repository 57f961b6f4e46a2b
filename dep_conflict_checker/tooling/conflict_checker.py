# dep_conflict_checker/tooling/conflict_checker.py
from dep_conflict_checker.data_models.interval import Bound, VersionInterval
from dep_conflict_checker.data_models.specifier import Operator, Specifier
from dep_conflict_checker.data_models.verdict import CheckReport, Verdict
from dep_conflict_checker.utils.logger import log_verbose


def specifier_to_interval(spec: Specifier) -> VersionInterval:
    v = spec.version
    op = spec.operator
    if op is Operator.GREATER_EQUAL:
        return VersionInterval(lower=Bound(v, inclusive=True))
    if op is Operator.GREATER:
        return VersionInterval(lower=Bound(v, inclusive=False))
    if op is Operator.LESS_EQUAL:
        return VersionInterval(upper=Bound(v, inclusive=True))
    if op is Operator.LESS:
        return VersionInterval(upper=Bound(v, inclusive=False))
    if op is Operator.EQUAL:
        return VersionInterval(lower=Bound(v, inclusive=True), upper=Bound(v, inclusive=True))
    if op is Operator.COMPATIBLE:
        return VersionInterval(
            lower=Bound(v, inclusive=True),
            upper=Bound(v.bump_for_compatible_release(), inclusive=False),
        )
    raise ValueError(f"Unsupported operator: {op!r}")


class ConflictChecker:
    def check(self, a: Specifier, b: Specifier) -> Verdict:
        return self.analyze(a, b).verdict

    def analyze(self, a: Specifier, b: Specifier) -> CheckReport:
        """
        Compares two specifiers.
        Returns a CheckReport holding the verdict and, when compatible,
        the range of versions both allow.
        """
        if a.normalized_name != b.normalized_name:
            log_verbose(f"[ConflictChecker] '{a.normalized_name}' and '{b.normalized_name}' are different packages.")
            return CheckReport(verdict=Verdict.NOT_COMPARABLE, pkg1=a.display, pkg2=b.display)

        interval_a = specifier_to_interval(a)
        interval_b = specifier_to_interval(b)
        overlap = interval_a.intersect(interval_b)
        log_verbose(f"[ConflictChecker] {a} -> {interval_a}; {b} -> {interval_b}; overlap -> {overlap}")

        if overlap.is_empty():
            return CheckReport(verdict=Verdict.CONFLICT, pkg1=a.display, pkg2=b.display, package=a.normalized_name)
        return CheckReport(
            verdict=Verdict.COMPATIBLE,
            pkg1=a.display,
            pkg2=b.display,
            package=a.normalized_name,
            satisfying_range=str(overlap),
        )
