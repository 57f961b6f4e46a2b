# dep_conflict_checker/utils/config_manager.py
import os  # For environment variables


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# --- Output ---
# Both can be overridden per invocation with --verbose / --color on the CLI.
VERBOSE_BY_DEFAULT = _env_flag("DEP_CONFLICT_CHECKER_VERBOSE", False)
COLOR_BY_DEFAULT = _env_flag("DEP_CONFLICT_CHECKER_COLOR", True)

# Exit status for malformed specifiers; usage errors keep click's own code (2).
PARSE_ERROR_EXIT_CODE = 1
