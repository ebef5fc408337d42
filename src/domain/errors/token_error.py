"""Token validation error messages.

Error value constants returned inside Failure by the token service. They are
not exceptions.

Usage:
    match token_service.validate_refresh_token(token):
        case Failure(error=TokenError.EXPIRED_TOKEN):
            ...
"""


class TokenError:
    """Token validation error constants."""

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    WRONG_TOKEN_TYPE = "Wrong token type"
