"""Custom exceptions for inputseq."""


class InputSequenceError(Exception):
    """Base exception for inputseq."""
    pass


class SequenceConfigurationError(InputSequenceError, ValueError):
    """A sequence, set or channel was constructed with invalid arguments."""
    pass


class InputSourceError(InputSequenceError):
    """Input source misuse by the host."""
    pass
