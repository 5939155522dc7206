"""
Registry Errors.

Contract violations raised by the filter registry. Callback failures are
never wrapped: they reach the caller of ``apply_filters`` unchanged.
"""

from __future__ import annotations

from typing import Optional


class FilterHooksError(Exception):
    """Base class for all filter registry errors."""
    pass


class HookTypeMismatchError(FilterHooksError, TypeError):
    """Raised when a value does not match the type bound to a hook."""

    def __init__(
        self,
        hook: str,
        expected: type,
        actual: type,
        filter_id: Optional[int] = None,
    ) -> None:
        self.hook = hook
        self.expected = expected
        self.actual = actual
        self.filter_id = filter_id

        if filter_id is None:
            message = (
                f"Type mismatch for hook '{hook}': "
                f"expected {expected.__name__}, got {actual.__name__}"
            )
        else:
            message = (
                f"Type mismatch for hook '{hook}': filter {filter_id} "
                f"returned {actual.__name__}, expected {expected.__name__}"
            )
        super().__init__(message)


class ReentrantMutationError(FilterHooksError, RuntimeError):
    """Raised when a filter modifies the hook it is being applied on."""

    def __init__(self, hook: str) -> None:
        self.hook = hook
        super().__init__(
            f"Cannot modify hook '{hook}' while its filters are being applied"
        )
