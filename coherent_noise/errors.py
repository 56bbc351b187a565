# coherent_noise/errors.py

"""
Error types and the eager argument checks that raise them.

Every check here runs at construction time. Once a sampler (or map) exists,
sampling cannot fail.
"""

import math
import numbers


class InvalidConfiguration(ValueError):
    """A construction parameter violates its documented constraint."""

    def __init__(self, parameter: str, value, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{parameter}': {value!r} ({reason})")


def require_integer(parameter: str, value) -> int:
    # bool is an Integral subclass but never a meaningful count or seed.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(parameter, value, "must be an integer")
    return int(value)


def require_positive_integer(parameter: str, value) -> int:
    value = require_integer(parameter, value)
    if value < 1:
        raise InvalidConfiguration(parameter, value, "must be >= 1")
    return value


def require_positive_float(parameter: str, value) -> float:
    """Accepts any finite real number strictly greater than zero."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(parameter, value, "must be a real number")
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidConfiguration(parameter, value, "must be finite and > 0")
    return value


def require_bool(parameter: str, value) -> bool:
    if not isinstance(value, bool):
        raise InvalidConfiguration(parameter, value, "must be True or False")
    return value


def require_choice(parameter: str, value, choices: dict) -> int:
    """Maps a named option onto its integer tag."""
    try:
        return choices[value]
    except (KeyError, TypeError):
        raise InvalidConfiguration(
            parameter, value, f"must be one of {sorted(choices)}"
        ) from None
