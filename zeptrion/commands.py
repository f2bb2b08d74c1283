"""Command models and request body builders for Zeptrion devices."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Sequence

from zeptrion import const
from zeptrion.exceptions import ButtonRangeError, LengthMismatchError

_COMPACT = (",", ":")


@dataclass(slots=True, frozen=True)
class ChannelCommand:
    """Switch a single channel on or off."""

    channel_id: int
    on: bool

    def as_term(self) -> str:
        """Return the form term, e.g. ``cmd1=on``."""
        value = const.CHANNEL_ON if self.on else const.CHANNEL_OFF
        return f"{const.KEY_CMD}{self.channel_id}={value}"


@dataclass(slots=True, frozen=True)
class LedCommand:
    """Set the background colour of a front LED."""

    led_id: int
    color: str

    def as_dict(self) -> dict[str, Any]:
        return {const.KEY_ID: self.led_id, const.KEY_BG: self.color}


@dataclass(slots=True, frozen=True)
class ButtonCommand:
    """Set or clear one of the nine buttons."""

    button_index: int
    pressed: bool

    def __post_init__(self) -> None:
        if (
            not isinstance(self.button_index, int)
            or not const.BUTTON_MIN <= self.button_index <= const.BUTTON_MAX
        ):
            raise ButtonRangeError(
                f"Button {self.button_index} out of range "
                f"{const.BUTTON_MIN}-{const.BUTTON_MAX}"
            )

    def as_field(self) -> str:
        """Return the 9-character button state field."""
        field = [const.BUTTON_PLACEHOLDER] * const.BUTTON_COUNT
        if self.pressed:
            field[self.button_index - 1] = const.BUTTON_PRESSED
        return "".join(field)

    def as_payload(self) -> str:
        """Return the websocket message text."""
        return json.dumps(
            {const.KEY_PID2: {const.KEY_BTA: self.as_field()}},
            separators=_COMPACT,
        )


def _check_lengths(name: str, ids: Sequence[Any], values: Sequence[Any]) -> None:
    if len(ids) != len(values):
        raise LengthMismatchError(
            f"{name}: {len(ids)} ids but {len(values)} values"
        )


def channel_commands(
    channel_ids: Sequence[int], values: Sequence[Any]
) -> list[ChannelCommand]:
    """Pair channel ids with on/off values.

    Values are interpreted by truthiness.
    """
    _check_lengths("set_channels", channel_ids, values)
    return [
        ChannelCommand(int(channel_id), bool(value))
        for channel_id, value in zip(channel_ids, values)
    ]


def led_commands(led_ids: Sequence[int], colors: Sequence[str]) -> list[LedCommand]:
    """Pair LED ids with colours. Colours are not validated."""
    _check_lengths("set_leds", led_ids, colors)
    return [LedCommand(int(led_id), color) for led_id, color in zip(led_ids, colors)]


def build_sys_body(command: str) -> str:
    return f"{const.KEY_CMD}={command}"


def build_channel_body(channel_ids: Sequence[int], values: Sequence[Any]) -> str:
    """Return ``cmd<id>=on&cmd<id>=off...`` in input order."""
    return "&".join(cmd.as_term() for cmd in channel_commands(channel_ids, values))


def build_led_body(led_ids: Sequence[int], colors: Sequence[str]) -> str:
    """Return the compact JSON array ``[{"id":<id>,"bg":"<color>"},...]``."""
    return json.dumps(
        [cmd.as_dict() for cmd in led_commands(led_ids, colors)],
        separators=_COMPACT,
    )


def build_button_payload(index: int, value: Any) -> str:
    return ButtonCommand(index, bool(value)).as_payload()
