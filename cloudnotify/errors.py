"""Error hierarchy."""


class CloudNotifyError(Exception):
    """Base class for errors raised by cloudnotify."""


class MalformedInputError(CloudNotifyError, ValueError):
    """Raised in strict mode when a text payload is not valid JSON."""


class ClassifierChainError(CloudNotifyError):
    """Raised when the configured classifier chain cannot be built."""


class NotificationDeliveryError(CloudNotifyError):
    """Raised when a notification sink fails to deliver a message."""
