"""Zeptrion client package.

A Python library for controlling Zeptrion lighting and switch controllers.

Supports:
- Channel on/off control (/zrap/chctrl)
- Smartfront LED background colours (/zapi/smartfront/led)
- Reboot, factory and network resets (/zrap/sys)
- Button state over the device websocket
"""

from zeptrion.client import (
    ConnectionState,
    DispatchResult,
    ZeptrionClient,
    ZeptrionRequest,
)
from zeptrion.exceptions import (
    ButtonRangeError,
    LengthMismatchError,
    NotConnectedError,
    ZeptrionError,
)

__version__ = "0.1.0"

__all__ = [
    "ButtonRangeError",
    "ConnectionState",
    "DispatchResult",
    "LengthMismatchError",
    "NotConnectedError",
    "ZeptrionClient",
    "ZeptrionError",
    "ZeptrionRequest",
    "__version__",
]
