"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from HtcUserError.

Programming errors, I/O failures and bugs should NOT inherit from
HtcUserError — they will propagate with full tracebacks.
"""

from __future__ import annotations


class HtcUserError(Exception):
    """
    Base class for all user-facing errors in the HTML Template Compiler.

    These errors indicate problems that the user can fix:
    malformed templates, invalid configuration, bad overrides, etc.
    """
    pass


__all__ = ["HtcUserError"]
