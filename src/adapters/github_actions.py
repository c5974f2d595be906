"""CI variable export (GitHub Actions).

Mirrors `core.exportVariable` from the Actions toolkit: the value is set in
the current environment and, when the runner exposes a `GITHUB_ENV` file,
appended to it so later workflow steps can read it.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path

from loguru import logger


def _env_file_entry(name: str, value: str) -> str:
    # Heredoc form keeps multi-line values intact.
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def export_variable(name: str, value: str) -> Path | None:
    """Export `name=value`; returns the GITHUB_ENV file written, if any."""

    os.environ[name] = value

    env_file = os.environ.get("GITHUB_ENV")
    if not env_file:
        logger.debug(f"GITHUB_ENV not set, {name} exported to the current process only")
        return None

    path = Path(env_file)
    with path.open("a", encoding="utf-8") as f:
        f.write(_env_file_entry(name, value))
    return path
