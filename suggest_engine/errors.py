"""
Error taxonomy for the suggest-projects function
"""
from typing import Optional


class SuggestionError(Exception):
    """Base error carrying the HTTP status and the message sent to callers"""
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(SuggestionError):
    """Body lacks a mandatory selection or uses an unknown one"""
    status_code = 400


class ConfigError(SuggestionError):
    """Upstream credential is missing from the environment"""


class RateLimitedError(SuggestionError):
    status_code = 429

    def __init__(self):
        super().__init__("Rate limits exceeded, please try again later.")


class PaymentRequiredError(SuggestionError):
    status_code = 402

    def __init__(self):
        super().__init__("Payment required, please add funds to your Lovable AI workspace.")


class GatewayError(SuggestionError):
    """Upstream failure, missing tool call or unusable tool arguments"""
