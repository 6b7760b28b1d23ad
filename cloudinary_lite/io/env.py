"""
Helpers for locating the environment file with account configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

CLOUDINARY_ENV_FILENAME = "cloudinary.env"


def default_env_path() -> Path:
    """
    Environment file in the user's home directory.
    """

    return Path.home() / CLOUDINARY_ENV_FILENAME


def find_env_file(path: Optional[Path] = None) -> Optional[Path]:
    """
    Return the first existing env file out of `path`, `./cloudinary.env`
    and `~/cloudinary.env`.
    """

    candidates = [path] if path is not None else []
    candidates += [Path.cwd() / CLOUDINARY_ENV_FILENAME, default_env_path()]
    for candidate in candidates:
        if candidate is not None and Path(candidate).is_file():
            return Path(candidate)
    return None
