"""Shared fixtures for dep_conflict_checker tests."""
import pytest
from typer.testing import CliRunner

from dep_conflict_checker.tooling.conflict_checker import ConflictChecker
from dep_conflict_checker.tooling.specifier_parser import SpecifierParser
from dep_conflict_checker.utils import logger


@pytest.fixture
def parser():
    return SpecifierParser()


@pytest.fixture
def checker():
    return ConflictChecker()


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_verbose_logging():
    """The CLI flips the module-level flag; keep tests independent of each other."""
    logger.set_verbose_logging(False)
    yield
    logger.set_verbose_logging(False)
