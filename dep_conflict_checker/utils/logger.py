# dep_conflict_checker/utils/logger.py
import sys

from dep_conflict_checker.utils import config_manager as config

ENABLE_VERBOSE_LOGGING = config.VERBOSE_BY_DEFAULT


def log_verbose(message: str):
    # stderr keeps stdout down to the single verdict line
    if ENABLE_VERBOSE_LOGGING:
        print(message, file=sys.stderr)


def set_verbose_logging(enable: bool):
    global ENABLE_VERBOSE_LOGGING
    ENABLE_VERBOSE_LOGGING = enable
