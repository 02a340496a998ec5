"""Enum name and case-line parsing.

A case line is either ``NAME=value`` or a bare ``NAME``. A bare name
gets its lowercased form as the backing value. Blank lines end input.
"""

from __future__ import annotations

import keyword
import re
from collections.abc import Iterable

from dbenum.domain.errors import (
    CaseValidationError,
    EnumNameValidationError,
    NoCasesError,
    ScaffoldValidationError,
)

ENUM_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
CASE_NAME_PATTERN = re.compile(r"^[A-Z_][A-Z0-9_]*$")
NAMESPACE_PATTERN = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")

# ``_X_`` names are reserved by the enum module and fail at import.
_SUNDER_PATTERN = re.compile(r"^_.*_$")

# Generated type modules import the runtime base class under this name.
RESERVED_ENUM_NAMES = frozenset({"EnumType"})


def validate_enum_name(name: str) -> str:
    """Return *name* stripped, or raise :class:`EnumNameValidationError`."""
    name = name.strip()
    if not ENUM_NAME_PATTERN.match(name):
        msg = "Enum name must start with uppercase and contain only letters and numbers."
        raise EnumNameValidationError(msg)
    if keyword.iskeyword(name):
        msg = f"Enum name {name!r} is a Python keyword."
        raise EnumNameValidationError(msg)
    if name in RESERVED_ENUM_NAMES:
        msg = f"Enum name {name!r} is reserved: it would shadow the column type base class."
        raise EnumNameValidationError(msg)
    return name


def validate_namespace(namespace: str) -> str:
    """Return *namespace* stripped, or raise if it is not a dotted module path."""
    namespace = namespace.strip()
    if not NAMESPACE_PATTERN.match(namespace):
        msg = f"Invalid namespace {namespace!r}: expected a dotted module path (e.g. app.enums)"
        raise ScaffoldValidationError(msg)
    return namespace


def validate_case_name(name: str) -> str:
    """Return *name*, or raise :class:`CaseValidationError`."""
    if not CASE_NAME_PATTERN.match(name):
        msg = (
            f"Invalid case name {name!r}: must be uppercase with underscores only "
            "(e.g. ACTIVE, IN_PROGRESS)"
        )
        raise CaseValidationError(msg)
    if _SUNDER_PATTERN.match(name):
        msg = f"Invalid case name {name!r}: names wrapped in underscores are reserved"
        raise CaseValidationError(msg)
    return name


def validate_case_value(value: str) -> str:
    """Return *value*, or raise if it cannot be written to a UTF-8 module."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"Invalid case value {value!r}: not encodable as UTF-8"
        raise CaseValidationError(msg) from exc
    return value


def parse_case(line: str) -> tuple[str, str] | None:
    """Parse one case line into ``(name, value)``.

    Returns None for a blank line (end of input).

    Examples:
        >>> parse_case("ACTIVE=active")
        ('ACTIVE', 'active')
        >>> parse_case("IN_PROGRESS")
        ('IN_PROGRESS', 'in_progress')
        >>> parse_case("   ") is None
        True
    """
    if not line.strip():
        return None

    if "=" in line:
        raw_name, raw_value = line.split("=", 1)
        name = raw_name.strip()
        value = raw_value.strip()
    else:
        name = line.strip()
        value = name.lower()

    return validate_case_name(name), validate_case_value(value)


def build_cases(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collect parsed pairs into an ordered case mapping.

    Raises:
        ScaffoldValidationError: On a duplicate name or backing value.
        NoCasesError: When no case was collected.
    """
    cases: dict[str, str] = {}
    for name, value in pairs:
        if name in cases:
            msg = f"Duplicate case name: {name}"
            raise ScaffoldValidationError(msg)
        if value in cases.values():
            msg = f"Duplicate case value: {value!r}"
            raise ScaffoldValidationError(msg)
        cases[name] = value

    if not cases:
        msg = "At least one case is required."
        raise NoCasesError(msg)
    return cases


def parse_cases(lines: Iterable[str]) -> dict[str, str]:
    """Parse case lines up to the first blank one into a case mapping.

    Non-interactive counterpart of the prompt loop: any malformed line
    raises instead of being retried.
    """
    pairs: list[tuple[str, str]] = []
    for line in lines:
        parsed = parse_case(line)
        if parsed is None:
            break
        pairs.append(parsed)
    return build_cases(pairs)
