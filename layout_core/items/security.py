"""
Security Scopes
===============

Permission bypass for system-level maintenance writes.
"""

from layout_core.switching import Disabler


class SecurityDisabler(Disabler):
    """
    Suspends item permission checks for the current context.

    Example:
        with SecurityDisabler():
            with EditContext(item):
                ...
    """
    pass


def security_enabled() -> bool:
    """True when permission checks apply in the current context."""
    return not SecurityDisabler.is_active()
