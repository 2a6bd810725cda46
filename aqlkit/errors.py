"""Custom exception hierarchy for aqlkit.

All public errors inherit from AqlKitError so callers can catch the base
class for any aqlkit-specific failure.  Query assembly itself is total over
its accepted inputs; these errors only signal a broken calling contract.
"""
from __future__ import annotations


class AqlKitError(Exception):
    """Base exception for all aqlkit errors."""


class TemplateArityError(AqlKitError):
    """Raised when a template invocation does not have one more fragment than values.

    Args:
        strings_count: Number of literal text fragments supplied.
        args_count: Number of interpolated values supplied.
    """

    def __init__(self, strings_count: int, args_count: int) -> None:
        super().__init__(
            f"Expected {args_count + 1} template fragment(s) for {args_count} "
            f"value(s), got {strings_count}."
        )
        self.strings_count = strings_count
        self.args_count = args_count


class BindVarConflictError(AqlKitError):
    """Raised when runtime bind vars would overwrite generated ones.

    Args:
        names: The conflicting bind parameter names.
    """

    def __init__(self, names: list[str]) -> None:
        joined = ", ".join(repr(n) for n in names)
        super().__init__(f"Bind parameter(s) already generated by the query: {joined}.")
        self.names = names
