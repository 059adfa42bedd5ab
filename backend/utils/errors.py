"""
Domain errors raised by the stores, the token service and the routers.

Each error carries the message shown to the client and the HTTP status it maps
to; the handlers in utils.error_handlers do the translation.
"""


class FundWatchError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(FundWatchError):
    status_code = 400
    message = "User already exists with this email"


class InvalidCredentialsError(FundWatchError):
    # Same message for unknown email and wrong password
    status_code = 401
    message = "Invalid email or password"


class MissingTokenError(FundWatchError):
    status_code = 401
    message = "Access token required"


class InvalidTokenError(FundWatchError):
    # Covers bad signatures and expired tokens alike
    status_code = 403
    message = "Invalid or expired token"


class UserNotFoundError(FundWatchError):
    status_code = 404
    message = "User not found"


class AlreadySavedError(FundWatchError):
    status_code = 400
    message = "Fund is already saved"

    def __init__(self, user_id: int, fund_id: str):
        self.user_id = user_id
        self.fund_id = fund_id
        super().__init__()


class SavedFundNotFoundError(FundWatchError):
    status_code = 404
    message = "Saved fund not found"

    def __init__(self, user_id: int, fund_id: str):
        self.user_id = user_id
        self.fund_id = fund_id
        super().__init__()
