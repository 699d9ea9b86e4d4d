"""Parsing of ``--config`` payloads.

A payload is either an inline JSON object or the path to a file holding
one. Anything starting with ``{`` is treated as inline JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from kf_cli.core.exceptions import ConfigPayloadError


def _os_error_text(error: OSError) -> str:
    return (error.strerror or str(error)).lower()


def parse_json_or_file(value: str) -> dict[str, Any]:
    """Parse an inline JSON object or a path to a JSON file.

    Args:
        value: Raw ``--config`` value.

    Returns:
        The decoded JSON object.

    Raises:
        ConfigPayloadError: If the file cannot be read, the content is not
            valid JSON, or the JSON is not an object.
    """
    raw: str | bytes = value.strip()
    if not value.lstrip().startswith("{"):
        try:
            raw = Path(value).read_bytes()
        except OSError as e:
            raise ConfigPayloadError(f"couldn't read file: open {value}: {_os_error_text(e)}") from e

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ConfigPayloadError(f"couldn't parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigPayloadError(
            f"config must be a JSON object, got {type(data).__name__}"
        )
    return data
