"""
CoinGecko Service - Errors
"""

from typing import Optional


class FetchError(Exception):
    """Base class for every failure of a markets fetch"""


class RequestFailed(FetchError):
    """Transport error or non-success HTTP status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeFailed(FetchError):
    """Response body is not a valid list of market records"""
