"""Validation of raw tool-invocation arguments.

Required arguments raise ToolArgumentError; optional ones fall back to their
default when absent or of the wrong type.
"""

import math
from collections.abc import Mapping
from typing import Any

from shopping_mcp.core.exceptions import ToolArgumentError
from shopping_mcp.infrastructure.observability import get_logger

logger = get_logger("tool_arguments")


def ensure_arguments(arguments: Any) -> Mapping[str, Any]:
    if arguments is None:
        return {}
    if not isinstance(arguments, Mapping):
        raise ToolArgumentError("Invalid arguments format")
    return arguments


def require_string(arguments: Mapping[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not isinstance(value, str):
        raise ToolArgumentError(f"{name} parameter is required and must be a string")
    return value


def optional_string(arguments: Mapping[str, Any], name: str, default: str = "") -> str:
    value = arguments.get(name)
    if value is None:
        return default
    if not isinstance(value, str):
        logger.warning("Ignoring non-string argument", argument=name, value_type=type(value).__name__)
        return default
    return value


def bounded_int(
    arguments: Mapping[str, Any],
    name: str,
    default: int,
    maximum: int,
    minimum: int = 1,
) -> int:
    """Read an integer argument, truncating floats and clamping to [minimum, maximum]."""
    value = arguments.get(name)
    number = default
    # bool is an int subclass; a flag is never a count.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            logger.warning("Ignoring non-finite argument", argument=name)
        else:
            number = int(value)
    elif value is not None:
        logger.warning("Ignoring non-numeric argument", argument=name, value_type=type(value).__name__)
    return max(minimum, min(number, maximum))
