# SPDX-License-Identifier: MIT
"""JSON serialization of structures containing Version objects.

Versions are written in their compact string form ("1.2.5-beta1+322"),
never as a breakdown of their fields.
"""

from __future__ import annotations

import json
from typing import Any

from .semver import Version


def json_default(obj: Any) -> str:
    """``default`` hook for :func:`json.dumps`.

    Raises:
        TypeError: If obj is not a Version
    """
    if isinstance(obj, Version):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize obj to JSON, rendering any Version as its string form.

    Examples:
        >>> from lexver import parse_version
        >>> dumps({"requires": parse_version("1.2.5-beta1+322")})
        '{"requires": "1.2.5-beta1+322"}'
    """
    kwargs.setdefault("default", json_default)
    return json.dumps(obj, **kwargs)
