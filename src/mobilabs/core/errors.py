"""
Exceptions raised by MobiLabs.

Capability absence is never an error (the handle is simply None), and
an unrecognized hardware string degrades to the simulator. Only genuine
platform limitations and failures surface here.
"""


class MobiLabsError(Exception):
    """Base class for MobiLabs errors."""

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        super().__init__(message or operation)


class UnsupportedOperationError(MobiLabsError, NotImplementedError):
    """The current platform or device cannot supply the requested value."""

    def __init__(self, operation: str, message: str = ""):
        super().__init__(
            operation,
            message or f"{operation} is not supported on this platform",
        )


class PlatformError(MobiLabsError):
    """A platform API call failed."""

    def __init__(self, operation: str, message: str = ""):
        super().__init__(operation, message or f"{operation} failed")
