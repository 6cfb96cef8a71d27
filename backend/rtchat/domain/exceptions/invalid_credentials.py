"""
InvalidCredentialsError - Raised when a username/password pair matches no user.
Maps to: HTTP 401 Unauthorized
"""


class InvalidCredentialsError(Exception):
    """Raised when authentication with username and password fails"""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
