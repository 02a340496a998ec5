"""Exception types shared by the scaffolder and the column type runtime.

Validation errors are recoverable: the caller reports them and asks
again. Configuration errors are fatal to the current run.
"""

from __future__ import annotations


class ScaffoldValidationError(ValueError):
    """User-supplied scaffold input is malformed."""


class EnumNameValidationError(ScaffoldValidationError):
    """The enum class name is not a valid identifier."""


class CaseValidationError(ScaffoldValidationError):
    """A single case line is malformed."""


class EnumConfigurationError(LookupError):
    """A column type or registry is wired to something that is not an enum."""


class NoCasesError(ScaffoldValidationError):
    """No enum case was supplied."""
