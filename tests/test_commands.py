"""Tests for Zeptrion request body builders."""
from __future__ import annotations

import json

import pytest

from zeptrion import commands, const
from zeptrion.exceptions import ButtonRangeError, LengthMismatchError


def test_channel_body_example() -> None:
    assert commands.build_channel_body([1, 3], [True, False]) == "cmd1=on&cmd3=off"


def test_channel_body_terms_follow_input_order() -> None:
    ids = [4, 2, 7, 1]
    values = [0, 1, 1, 0]
    body = commands.build_channel_body(ids, values)
    assert not body.startswith("&")
    assert not body.endswith("&")
    terms = body.split("&")
    assert terms == ["cmd4=off", "cmd2=on", "cmd7=on", "cmd1=off"]


def test_channel_body_single_term() -> None:
    assert commands.build_channel_body([1], [0]) == "cmd1=off"


def test_channel_length_mismatch() -> None:
    with pytest.raises(LengthMismatchError):
        commands.build_channel_body([1, 2], [True])


def test_led_body_example() -> None:
    body = commands.build_led_body(
        [2, 3, 4], [const.YELLOW, const.CYAN, const.CYAN]
    )
    assert body == (
        '[{"id":2,"bg":"#FFFF00"},{"id":3,"bg":"#00FFFF"},{"id":4,"bg":"#00FFFF"}]'
    )
    assert json.loads(body) == [
        {"id": 2, "bg": "#FFFF00"},
        {"id": 3, "bg": "#00FFFF"},
        {"id": 4, "bg": "#00FFFF"},
    ]


def test_led_colors_pass_through_verbatim() -> None:
    body = commands.build_led_body([1], ["#zz"])
    assert json.loads(body) == [{"id": 1, "bg": "#zz"}]


def test_led_length_mismatch() -> None:
    with pytest.raises(LengthMismatchError):
        commands.build_led_body([1], [const.RED, const.BLUE])


def test_length_mismatch_is_value_error() -> None:
    with pytest.raises(ValueError):
        commands.led_commands([], [const.RED])


@pytest.mark.parametrize("index", [0, 10, -1])
def test_button_out_of_range(index: int) -> None:
    with pytest.raises(ButtonRangeError):
        commands.build_button_payload(index, 1)


def test_button_pressed_marks_position() -> None:
    payload = commands.build_button_payload(5, 1)
    assert payload == '{"pid2":{"bta":"....P...."}}'
    field = json.loads(payload)["pid2"]["bta"]
    assert len(field) == 9
    assert field[4] == "P"


def test_button_released_is_all_placeholders() -> None:
    assert commands.build_button_payload(5, 0) == '{"pid2":{"bta":"........."}}'


def test_button_edges() -> None:
    assert commands.ButtonCommand(1, True).as_field() == "P........"
    assert commands.ButtonCommand(9, True).as_field() == "........P"


def test_sys_body() -> None:
    assert commands.build_sys_body(const.SYS_FACTORY_DEFAULT) == "cmd=factory-default"


def test_device_paths() -> None:
    assert const.ZRAP_SYS in const.DEVICE_PATHS
    assert const.ZAPI_LED not in const.UNUSED_PATHS
    assert len(const.UNUSED_PATHS) == 16


@pytest.mark.parametrize("index", [5.0, "5", None])
def test_button_index_must_be_int(index: object) -> None:
    with pytest.raises(ButtonRangeError):
        commands.build_button_payload(index, 1)  # type: ignore[arg-type]
