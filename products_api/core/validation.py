"""Request Validation Pipeline: declarative field rules with violation accumulation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - evaluate_rules runs EVERY rule in declaration order; it never stops at the first failure
    - Absent fields reach checks as None; optional rules skip absent fields
    - Checks judge the value's string form, so "50" and 50 are both numeric

Design Decisions:
    - A rule is a (location, field, check, message) record; one field may carry
      several independent rules
    - Violations are values, raising is left to the caller (api/dependencies.py)
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from products_api.core.domain_types import RequestLocation

_INT_PATTERN = re.compile(r"[-+]?[0-9]+")
_NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})
_TRUE_STRINGS = frozenset({"true", "1"})

Check = Callable[[Any], bool]


@dataclass(frozen=True)
class Violation:
    """A single validation failure: the field it concerns and why."""
    field: str
    message: str
    location: RequestLocation
    value: Any = None
    present: bool = False

    def to_dict(self) -> dict:
        payload = {
            "type": "field",
            "msg": self.message,
            "path": self.field,
            "location": self.location.value,
        }
        if self.present:
            payload["value"] = self.value
        return payload


@dataclass(frozen=True)
class FieldRule:
    """One predicate+message pair bound to a request field."""
    location: RequestLocation
    field: str
    check: Check
    message: str
    optional: bool = False


def evaluate_rules(
    rules: Sequence[FieldRule],
    params: Mapping[str, Any],
    body: Mapping[str, Any],
) -> list[Violation]:
    """Run every rule against the request and collect violations in rule order."""
    sources = {RequestLocation.PARAMS: params, RequestLocation.BODY: body}
    violations: list[Violation] = []
    for rule in rules:
        source = sources[rule.location]
        present = rule.field in source
        if rule.optional and not present:
            continue
        value = source.get(rule.field)
        if not rule.check(value):
            violations.append(Violation(
                field=rule.field, message=rule.message,
                location=rule.location, value=value, present=present,
            ))
    return violations


# ─── Value rendering ─────────────────────────────────────────────

def as_text(value: Any) -> str:
    """String form a check judges. None → "", JSON booleans → "true"/"false"."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


# ─── Checks ──────────────────────────────────────────────────────

def is_int(value: Any) -> bool:
    return bool(_INT_PATTERN.fullmatch(as_text(value)))


def is_not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_not_blank(value: Any) -> bool:
    return as_text(value).strip() != ""


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return bool(_NUMERIC_PATTERN.fullmatch(as_text(value)))


def is_positive(value: Any) -> bool:
    number = to_number(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_STRINGS


# ─── Coercion ────────────────────────────────────────────────────

def to_number(value: Any) -> float | None:
    """Finite numeric reading of a value, or None when it has none."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def to_bool(value: Any) -> bool:
    """Boolean reading of a value that already passed is_boolean."""
    return as_text(value) in _TRUE_STRINGS
