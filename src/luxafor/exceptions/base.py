"""Root of the luxafor exception tree.

Every error the package raises on purpose is a LuxaforError, so callers
(the CLI included) can catch one type and still show something useful:
a short message for people, a detailed one for logs, and an optional
hint on what to try next.
"""

from typing import Optional


class LuxaforError(Exception):
    """
    Base exception for luxafor.

    Attributes:
        user_message: Short message safe to print on the command line
        technical_message: Detailed message for logs (falls back to user_message)
        recoverable: True if retrying, or fixing input, can succeed
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
