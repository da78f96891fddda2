"""
Exceptions raised by the HMAC engines.

Argument type and value problems use the builtin TypeError and ValueError.
"""


class HMACError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class HMACStateError(HMACError):
    """update() or final() on a context that is not initialized."""


class HMACAllocationError(HMACError):
    """Scratch buffer for the SHA-3 path could not be allocated."""
