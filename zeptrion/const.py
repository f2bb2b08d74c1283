"""Constants for the Zeptrion device API."""
from __future__ import annotations

# ZRAP paths.
ZRAP_SYS = "/zrap/sys"
ZRAP_CHSCAN = "/zrap/chscan"
ZRAP_CHNOTIFY = "/zrap/chnotify"
ZRAP_CHCTRL = "/zrap/chctrl"
ZRAP_CHDES = "/zrap/chdes"
ZRAP_NETSCAN = "/zrap/netscan"
ZRAP_NET = "/zrap/net"
ZRAP_RSSI = "/zrap/rssi"
ZRAP_ID = "/zrap/id"
ZRAP_LOC = "/zrap/loc"
ZRAP_DATE = "/zrap/date"
ZRAP_SCHED = "/zrap/scheduler"
ZRAP_NTP = "/zrap/ntp"

# ZAPI (smart module) paths.
ZAPI_ID = "/zapi/smartfront/id"
ZAPI_SENSOR = "/zapi/smartfront/sensor"
ZAPI_LED = "/zapi/smartfront/led"
ZAPI_PRGM = "/zapi/smartbt/prgm"
ZAPI_PRGN = "/zapi/smartbt/prgn"
ZAPI_PRGS = "/zapi/smartbt/prgs"

# Part of the documented address space, no operation uses them yet.
UNUSED_PATHS = frozenset(
    {
        ZRAP_CHSCAN,
        ZRAP_CHNOTIFY,
        ZRAP_CHDES,
        ZRAP_NETSCAN,
        ZRAP_NET,
        ZRAP_RSSI,
        ZRAP_ID,
        ZRAP_LOC,
        ZRAP_DATE,
        ZRAP_SCHED,
        ZRAP_NTP,
        ZAPI_ID,
        ZAPI_SENSOR,
        ZAPI_PRGM,
        ZAPI_PRGN,
        ZAPI_PRGS,
    }
)
DEVICE_PATHS = UNUSED_PATHS | {ZRAP_SYS, ZRAP_CHCTRL, ZAPI_LED}

HTTP_SCHEME = "http://"
WS_SCHEME = "ws://"
METHOD_POST = "POST"

# /zrap/sys command values.
KEY_CMD = "cmd"
SYS_REBOOT = "reboot"
SYS_FACTORY_DEFAULT = "factory-default"
SYS_NETWORK_DEFAULT = "network-default"

CHANNEL_ON = "on"
CHANNEL_OFF = "off"

KEY_ID = "id"
KEY_BG = "bg"

# Button state envelope sent over the websocket.
KEY_PID2 = "pid2"
KEY_BTA = "bta"
BUTTON_COUNT = 9
BUTTON_MIN = 1
BUTTON_MAX = BUTTON_COUNT
BUTTON_PLACEHOLDER = "."
BUTTON_PRESSED = "P"

# Front LED colours ('#RRGGBB').
RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"
WHITE = "#FFFFFF"
BLACK = "#000000"
YELLOW = "#FFFF00"
MAGENTA = "#FF00FF"
CYAN = "#00FFFF"

COLORS = {
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "white": WHITE,
    "black": BLACK,
    "yellow": YELLOW,
    "magenta": MAGENTA,
    "cyan": CYAN,
}
