class WebhookError(Exception):
    """Base class for failures raised while processing a webhook."""


class AuthenticationError(WebhookError):
    """The request could not be authenticated.

    Every verification failure collapses into this one error with the same
    message, so callers cannot tell a missing header from a bad digest.
    """

    def __init__(self):
        super().__init__("signature verification failed")


class MalformedPayloadError(WebhookError):
    """The authenticated body is not a well-formed event."""
