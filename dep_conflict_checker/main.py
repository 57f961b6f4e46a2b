# dep_conflict_checker/main.py
from typing import Optional

import typer

from dep_conflict_checker import __version__
from dep_conflict_checker.data_models import ParseError, Specifier, Verdict
from dep_conflict_checker.tooling.conflict_checker import ConflictChecker
from dep_conflict_checker.tooling.specifier_parser import SpecifierParser
from dep_conflict_checker.utils import config_manager as config
from dep_conflict_checker.utils import logger

app = typer.Typer(
    name="dep-conflict-checker",
    help="Check whether two package version specifiers can both be satisfied.",
    add_completion=False,
)

VERDICT_COLORS = {
    Verdict.COMPATIBLE: typer.colors.GREEN,
    Verdict.CONFLICT: typer.colors.RED,
    Verdict.NOT_COMPARABLE: typer.colors.YELLOW,
}


def _version_callback(value: bool):
    if value:
        typer.echo(f"dep-conflict-checker {__version__}")
        raise typer.Exit()


def _parse_or_exit(parser: SpecifierParser, flag: str, raw: str) -> Specifier:
    try:
        return parser.parse(raw)
    except ParseError as e:
        typer.echo(f"Error: invalid {flag} specifier '{e.raw}': {e.reason}", err=True)
        raise typer.Exit(code=config.PARSE_ERROR_EXIT_CODE)


@app.command()
def check(
    pkg1: str = typer.Option(..., "--pkg1", "-1", help='First package with version constraint (e.g. "requests>=2.0.0").'),
    pkg2: str = typer.Option(..., "--pkg2", "-2", help='Second package with version constraint (e.g. "requests<3.0.0").'),
    verbose: bool = typer.Option(config.VERBOSE_BY_DEFAULT, "--verbose", "-v", help="Trace parsing and range computation on stderr."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as a JSON object."),
    color: bool = typer.Option(config.COLOR_BY_DEFAULT, "--color/--no-color", help="Colour the verdict line."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """
    Report whether PKG1 and PKG2 can both be satisfied.

    Exits 0 whenever a verdict is printed, 1 if a specifier is malformed.
    """
    logger.set_verbose_logging(verbose)

    parser = SpecifierParser()
    spec1 = _parse_or_exit(parser, "--pkg1", pkg1)
    spec2 = _parse_or_exit(parser, "--pkg2", pkg2)

    logger.log_verbose("Analyzing potential conflicts between:")
    logger.log_verbose(f"  Package 1: {spec1.package_name} {spec1.operator.value}{spec1.version}")
    logger.log_verbose(f"  Package 2: {spec2.package_name} {spec2.operator.value}{spec2.version}")

    report = ConflictChecker().analyze(spec1, spec2)

    if as_json:
        typer.echo(report.model_dump_json())
        return

    # None lets click strip colours when stdout is not a terminal
    typer.secho(report.summary_line(), fg=VERDICT_COLORS[report.verdict], color=None if color else False)
    if report.satisfying_range:
        logger.log_verbose(f"Versions satisfying both: {report.satisfying_range}")


def run():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    run()
