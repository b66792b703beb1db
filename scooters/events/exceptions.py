class NoSuchEventError(AttributeError):
    """Raised when an event is not available on a hub."""


class NoSuchListenerError(KeyError):
    """Raised when removing a handler that is not subscribed."""


class InvalidHandlerError(TypeError):
    """Raised when a handler cannot accept the arguments of the event it subscribes to."""
