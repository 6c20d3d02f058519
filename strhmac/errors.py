class HMACError(Exception):
    """Base class for errors raised by strhmac."""


class TextEncodingError(HMACError, ValueError):
    """A text argument could not be encoded as UTF-8."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(argument, reason)

    def __str__(self):
        return f"{self.argument} is not valid UTF-8 text: {self.reason}"
