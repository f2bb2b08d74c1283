"""Exceptions raised by the Zeptrion client."""


class ZeptrionError(Exception):
    """Base error for the Zeptrion client."""


class LengthMismatchError(ZeptrionError, ValueError):
    """Batch identifiers and values differ in length."""


class ButtonRangeError(ZeptrionError, ValueError):
    """Button index outside the supported range."""


class NotConnectedError(ZeptrionError):
    """The websocket connection is not open."""
