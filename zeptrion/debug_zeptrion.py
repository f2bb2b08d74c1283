"""Debug helper for a Zeptrion device."""
import asyncio
import os

from zeptrion import const
from zeptrion.client import DispatchResult, ZeptrionClient
from zeptrion.exceptions import ZeptrionError


def cb(result: DispatchResult):
    target = result.request.url if result.request else "websocket"
    print(target, "status", result.status, "error", result.error, "body", result.body)


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on", "y"}


def _env_int(name: str, default: int) -> int:
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        return float(val.strip())
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    val = os.environ.get(name)
    if not val:
        return default
    items = [item.strip() for item in val.split(",") if item.strip()]
    return items or default


async def main() -> None:
    host = os.environ.get("ZEPTRION_HOST", "192.168.0.1")  # direct connection
    wait = _env_float("ZEPTRION_WAIT", 2.0)
    channels = [int(ch) for ch in _env_list("ZEPTRION_CHANNELS", ["1"])]
    channel_on = _env_bool("ZEPTRION_CHANNEL_ON")
    button = _env_int("ZEPTRION_BUTTON", 0)

    async with ZeptrionClient(host, on_result=cb, on_message=print) as zc:
        try:
            if _env_bool("ZEPTRION_LED_TEST", True):
                zc.set_leds([1], [const.MAGENTA])
                zc.set_leds([2, 3, 4], [const.YELLOW, const.CYAN, const.CYAN])
            zc.set_channels(channels, [channel_on] * len(channels))
        except ZeptrionError as exc:
            print("command-error", exc)

        await asyncio.sleep(wait)
        print("connection", zc.connection_state.value)
        if button:
            try:
                zc.set_button(button, 1)
            except ZeptrionError as exc:
                print("button-error", exc)
        await zc.flush()


if __name__ == "__main__":
    asyncio.run(main())
