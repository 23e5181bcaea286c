"""Config locator — search the grc directories for a rule file."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SYSTEM_DIRS = ("/usr/local/share/grc", "/usr/share/grc")


def candidate_dirs(environ=None, home=None, extra_dirs=()) -> list[Path]:
    """Return the directories to search, in priority order.

    extra_dirs come first, then XDG config, XDG data, ~/.grc and the
    system-wide directories.
    """
    if environ is None:
        environ = os.environ
    home_path = Path(home) if home is not None else Path.home()

    xdg_config = environ.get("XDG_CONFIG_HOME")
    xdg_data = environ.get("XDG_DATA_HOME")
    config_dir = Path(xdg_config) / "grc" if xdg_config else home_path / ".config" / "grc"
    data_dir = Path(xdg_data) / "grc" if xdg_data else home_path / ".local" / "share" / "grc"

    dirs = [Path(d) for d in extra_dirs]
    dirs += [config_dir, data_dir, home_path / ".grc"]
    dirs += [Path(d) for d in SYSTEM_DIRS]
    return dirs


def find_config(name: str, dirs: list[Path]) -> Path | None:
    """Return the first existing, non-directory match for name, or None.

    A name containing a path separator is tried as a path first.
    """
    if os.sep in name or (os.altsep and os.altsep in name):
        direct = Path(name)
        if direct.is_file():
            return direct

    for directory in dirs:
        path = directory / name
        if path.exists() and not path.is_dir():
            return path
        logger.debug("No %s in %s", name, directory)

    return None
