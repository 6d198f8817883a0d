"""
Error types for the i3 config searcher
"""


class I3ConfigSearchError(Exception):
    """Base class for all errors raised by this package"""


class ParseError(I3ConfigSearchError):
    """The tag grammar could not be constructed"""

    def __init__(self, message: str = "failed to parse i3 config"):
        super().__init__(message)


class LoadError(I3ConfigSearchError):
    """The configuration text could not be obtained"""


class KeySequenceError(I3ConfigSearchError):
    """A keys annotation does not describe a typeable key chord"""
