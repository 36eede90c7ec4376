class RelayError(Exception):
    """Base class for failures reported back to SNS as a 500 response."""


class DecodeError(RelayError):
    def __init__(self, reason, message=None):
        super().__init__(reason)
        # Partially decoded SNSMessage, set when only the local zone conversion failed
        self.message = message


class DeliveryError(RelayError):
    pass


class ConfirmationError(RelayError):
    pass


class ConfigError(Exception):
    pass
