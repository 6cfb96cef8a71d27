"""
UnauthorizedError - Raised when a bearer credential is missing or does not
resolve to a known user.
Maps to: HTTP 401 Unauthorized / websocket close 1008
"""


class UnauthorizedError(Exception):
    """Raised when the caller cannot be identified"""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)
