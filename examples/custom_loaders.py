"""Custom loaders, search places and transforms.

This example registers an INI loader, narrows the search places and
wraps every result in a transform that fills in default settings.
"""

import configparser
from pathlib import Path
from typing import Any

from configseek import ConfigResult, create_explorer


def load_ini(filepath: Path, contents: str) -> dict[str, dict[str, str]]:
    """Parse INI text into nested dicts."""
    parser = configparser.ConfigParser()
    parser.read_string(contents, source=str(filepath))
    return {section: dict(parser[section]) for section in parser.sections()}


DEFAULTS: dict[str, Any] = {"log_level": "INFO"}


def with_defaults(result: ConfigResult | None) -> ConfigResult | None:
    """Merge found settings over DEFAULTS."""
    if result is None or result.is_empty:
        return result
    return ConfigResult(filepath=result.filepath, config={**DEFAULTS, **result.config})


explorer = create_explorer(
    "myapp",
    search_places=[".myapprc.ini", "setup.cfg", ".myapprc.yaml"],
    loaders={".ini": load_ini, ".cfg": load_ini},
    transform=with_defaults,
    # Stop at the repository root instead of the home directory
    stop_dir=Path.cwd(),
)

if __name__ == "__main__":
    result = explorer.search()
    print(result.config if result is not None else DEFAULTS)
