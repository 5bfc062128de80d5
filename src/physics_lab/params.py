# MIT License (see LICENSE)
"""
Parameter specifications for the demo controls.

Each demo declares a table of ParameterSpec entries describing the
adjustable inputs (name, default, range, unit). The core assumes
pre-validated input; set_parameter clamps into range at this boundary so
a slider overshoot can never reach the integrators.
"""
from __future__ import annotations
from dataclasses import dataclass

from .util import clamp


class UnknownParameterError(KeyError):
    """Raised when a demo is asked to set a parameter it does not declare."""


@dataclass(frozen=True)
class ParameterSpec:
    """
    Documented range of one control parameter.

    Attributes:
        name: Attribute name on the demo's parameter dataclass.
        default: Initial value.
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive).
        unit: Display unit, "" for dimensionless values.
    """
    name: str
    default: float
    minimum: float
    maximum: float
    unit: str = ""

    def clamp(self, value: float) -> float:
        return clamp(float(value), self.minimum, self.maximum)


def spec_table(*specs: ParameterSpec) -> dict[str, ParameterSpec]:
    """Index specs by name, preserving declaration order."""
    return {s.name: s for s in specs}


def lookup(specs: dict[str, ParameterSpec], name: str) -> ParameterSpec:
    """Return the spec for name or raise UnknownParameterError listing valid names."""
    try:
        return specs[name]
    except KeyError:
        raise UnknownParameterError(
            f"Unknown parameter {name!r}; expected one of {sorted(specs)}"
        ) from None
