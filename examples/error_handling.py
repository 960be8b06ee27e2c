"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from configseek import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigResult,
    ConfigseekError,
    ConfigurationError,
    NoLoaderError,
    create_explorer,
)


explorer = create_explorer("myapp")


# Pattern 1: Invalid options are rejected up front
def create_with_ini_places() -> None:
    """Search places need a loader for their extension."""
    try:
        create_explorer("myapp", search_places=[".myapprc.ini"])
    except ConfigurationError as e:
        print(f"Bad options: {e}")


# Pattern 2: A broken file stops the search
def search_or_report() -> ConfigResult | None:
    """Search, reporting which file failed to parse."""
    try:
        return explorer.search()
    except ConfigParseError as e:
        # recovery_hint names the file to fix
        print(f"Could not parse {e.filepath}: {e.cause}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 3: Direct loads do not forgive missing files
def load_optional(path: Path) -> ConfigResult | None:
    """Load a file, returning None if it does not exist."""
    try:
        return explorer.load(path)
    except ConfigNotFoundError:
        return None


# Pattern 4: Catch-all for any library error
def load_safe(path: Path) -> ConfigResult | None:
    """Load a file with comprehensive error handling."""
    try:
        return explorer.load(path)
    except NoLoaderError as e:
        print(f"Unsupported file type: {e.extension or '(none)'}")
        return None
    except ConfigseekError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return None


if __name__ == "__main__":
    create_with_ini_places()
    search_or_report()
    load_safe(Path("settings.ini"))
