"""
utils/validation_utils.py

Purpose: Input validation

- Verification token comparison
"""

import hmac
from typing import Optional


def tokens_match(expected: Optional[str], received: Optional[str]) -> bool:
    """
    Compares a received verification token with the configured one.

    An unconfigured secret never matches, so a missing token cannot
    pass against a missing secret.

    Args:
        expected: Configured verification token
        received: Token carried by the inbound payload

    Returns:
        True if both are set and equal
    """
    if not expected or not isinstance(received, str) or not received:
        return False

    return hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8"))
