import hmac
from typing import Optional


def verify_api_key(provided: Optional[str], expected: Optional[str]) -> bool:
    """Constant-time comparison; an unconfigured server key rejects everything"""
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
