import os
from pathlib import Path
from typing import Mapping, Optional

from alvr_filesystem.errors import ConfigLookupError


def home_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    if environ is None:
        environ = os.environ

    home = environ.get("HOME")
    if home:
        return Path(home)

    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigLookupError(
            "Could not determine the user home directory"
        ) from exc


def config_home(environ: Optional[Mapping[str, str]] = None) -> Path:
    if environ is None:
        environ = os.environ

    # XDG base directory spec: relative values are ignored
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)

    return home_dir(environ) / ".config"
