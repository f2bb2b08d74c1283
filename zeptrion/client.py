"""Client for Zeptrion lighting/switch controllers."""
from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable, Coroutine, Sequence

from aiohttp import ClientSession, ClientWebSocketResponse, WSMsgType, hdrs

from zeptrion import const
from zeptrion.commands import (
    build_button_payload,
    build_channel_body,
    build_led_body,
    build_sys_body,
)
from zeptrion.exceptions import NotConnectedError, ZeptrionError

_LOGGER = logging.getLogger(__name__)

_CLOSE_TYPES = (WSMsgType.CLOSE, WSMsgType.CLOSING, WSMsgType.CLOSED)


class ConnectionState(enum.Enum):
    """Websocket connection state."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


@dataclass(slots=True, frozen=True)
class ZeptrionRequest:
    """An outbound HTTP request. No headers are set."""

    url: str
    method: str
    body: str


@dataclass(slots=True)
class DispatchResult:
    """Outcome of a fire-and-forget dispatch."""

    request: ZeptrionRequest | None
    status: int | None = None
    body: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        if self.error is not None or self.status is None:
            return False
        return 200 <= self.status < 300


ResultCallback = Callable[[DispatchResult], None]
MessageCallback = Callable[[str | bytes], None]


class ZeptrionClient:
    """Fire-and-forget command client for a single Zeptrion device.

    Commands are validated synchronously and dispatched as background
    tasks on the running event loop. Transport failures are logged and
    reported to ``on_result``; they never raise into the caller.

    The websocket is not reconnected. Once the state is CLOSED the
    client must be discarded and a new one built, which is also required
    after ``reboot``, ``hard_reset`` and ``network_reset``.
    """

    def __init__(
        self,
        address: str,
        session: ClientSession | None = None,
        *,
        on_result: ResultCallback | None = None,
        on_message: MessageCallback | None = None,
        heartbeat: float | None = None,
    ) -> None:
        self._address = address
        self._session = session
        self._owns_session = session is None
        self._on_result = on_result
        self._on_message_cb = on_message
        self._heartbeat = heartbeat

        self._state = ConnectionState.CONNECTING
        self._closed = False
        self._ws: ClientWebSocketResponse | None = None
        self._ws_task: asyncio.Task[None] | None = None
        self._pending: set[asyncio.Task[Any]] = set()
        self._subscribers: set[asyncio.Queue[str | bytes | None]] = set()

    @classmethod
    async def create(
        cls,
        address: str,
        session: ClientSession | None = None,
        **kwargs: Any,
    ) -> ZeptrionClient:
        """Build a client and open its websocket."""
        client = cls(address, session, **kwargs)
        await client.connect()
        return client

    async def __aenter__(self) -> ZeptrionClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @property
    def address(self) -> str:
        return self._address

    @property
    def connection_state(self) -> ConnectionState:
        """Return the current websocket state."""
        return self._state

    @property
    def ws_url(self) -> str:
        return f"{const.WS_SCHEME}{self._address}"

    def url(self, path: str) -> str:
        return f"{const.HTTP_SCHEME}{self._address}{path}"

    def request_opt(self, path: str, method: str, body: str) -> ZeptrionRequest:
        """Build the request descriptor shared by every HTTP dispatch."""
        return ZeptrionRequest(url=self.url(path), method=method, body=body)

    async def connect(self) -> None:
        """Start the websocket task.

        The state stays CONNECTING until the transport reports open.
        """
        if self._state is ConnectionState.CLOSED:
            raise ZeptrionError(
                f"Connection to {self._address} is closed; create a new client"
            )
        if self._ws_task is not None:
            return
        self._ws_task = asyncio.create_task(self._ws_worker())

    async def close(self) -> None:
        """Finish pending dispatches, then stop the websocket and owned session."""
        await self.flush()
        self._closed = True
        if self._ws_task:
            self._ws_task.cancel()
            try:
                await self._ws_task
            except asyncio.CancelledError:
                pass
            self._ws_task = None
        if self._ws is not None and not self._ws.closed:
            await self._ws.close()
        self._ws = None
        if self._state is not ConnectionState.CLOSED:
            self._on_close(None, "client closed")
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def flush(self) -> None:
        """Wait for every scheduled dispatch to finish."""
        while self._pending:
            tasks = list(self._pending)
            await asyncio.gather(*tasks, return_exceptions=True)
            self._pending.difference_update(tasks)

    def subscribe(self, maxsize: int = 0) -> asyncio.Queue[str | bytes | None]:
        """Return a queue of raw websocket payloads.

        ``None`` is queued when the connection ends. With the default
        ``maxsize`` of 0 the queue is unbounded and grows until read;
        a bounded queue drops new payloads while full.
        """
        queue: asyncio.Queue[str | bytes | None] = asyncio.Queue(maxsize)
        if self._state is ConnectionState.CLOSED:
            queue.put_nowait(None)
        else:
            self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str | bytes | None]) -> None:
        self._subscribers.discard(queue)

    async def messages(self) -> AsyncIterator[str | bytes]:
        """Async iterator over raw websocket payloads."""
        queue = self.subscribe()
        try:
            while True:
                data = await queue.get()
                if data is None:
                    return
                yield data
        finally:
            self.unsubscribe(queue)

    # /zrap/sys

    def reboot(self) -> None:
        """Reboot the device. The websocket must be rebuilt afterwards."""
        self._post_sys(const.SYS_REBOOT)

    def hard_reset(self) -> None:
        """Restore factory defaults. The device disconnects."""
        self._post_sys(const.SYS_FACTORY_DEFAULT)

    def network_reset(self) -> None:
        """Restore network defaults. The device disconnects."""
        self._post_sys(const.SYS_NETWORK_DEFAULT)

    def set_channels(self, channel_ids: Sequence[int], values: Sequence[Any]) -> None:
        """Switch channels on (truthy) or off (falsy)."""
        body = build_channel_body(channel_ids, values)
        self._post(const.ZRAP_CHCTRL, body)

    def set_leds(self, led_ids: Sequence[int], colors: Sequence[str]) -> None:
        """Set front LED background colours ('#RRGGBB')."""
        body = build_led_body(led_ids, colors)
        self._post(const.ZAPI_LED, body)

    def set_button(self, index: int, value: Any) -> None:
        """Set (truthy) or clear button ``index`` (1-9) over the websocket."""
        payload = build_button_payload(index, value)
        if self._state is not ConnectionState.OPEN or self._ws is None:
            raise NotConnectedError(
                f"Websocket to {self._address} is {self._state.value}"
            )
        self._schedule(self._send_ws(self._ws, payload))

    def _post_sys(self, command: str) -> None:
        _LOGGER.info("Zeptrion %s: sending %s", self._address, command)
        self._post(const.ZRAP_SYS, build_sys_body(command))

    def _post(self, path: str, body: str) -> None:
        request = self.request_opt(path, const.METHOD_POST, body)
        self._schedule(self._send_request(request))

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _get_session(self) -> ClientSession:
        if self._closed:
            raise ZeptrionError(f"Client for {self._address} is closed")
        if self._session is None or self._session.closed:
            self._session = ClientSession()
            self._owns_session = True
        return self._session

    async def _send_request(self, request: ZeptrionRequest) -> None:
        result = DispatchResult(request=request)
        try:
            session = await self._get_session()
            async with session.request(
                request.method,
                request.url,
                data=request.body.encode(),
                skip_auto_headers=(hdrs.CONTENT_TYPE,),
            ) as response:
                result.status = response.status
                result.body = await response.text()
        except asyncio.CancelledError:
            raise
        except Exception as err:  # pylint: disable=broad-except
            result.error = err
        self._callback(result)

    async def _send_ws(self, ws: ClientWebSocketResponse, payload: str) -> None:
        result = DispatchResult(request=None, body=payload)
        try:
            await ws.send_str(payload)
        except asyncio.CancelledError:
            raise
        except Exception as err:  # pylint: disable=broad-except
            result.error = err
        if result.error is not None:
            _LOGGER.warning(
                "Zeptrion %s: websocket send failed: %s", self._address, result.error
            )
        else:
            _LOGGER.debug("Zeptrion %s: websocket sent %s", self._address, payload)
        self._notify_result(result)

    def _callback(self, result: DispatchResult) -> None:
        """Log the outcome of an HTTP dispatch."""
        url = result.request.url if result.request else None
        if result.error is not None:
            _LOGGER.warning("Zeptrion request %s failed: %s", url, result.error)
        elif not result.ok:
            _LOGGER.warning(
                "Zeptrion request %s returned status %s: %s",
                url,
                result.status,
                result.body,
            )
        else:
            _LOGGER.debug(
                "Zeptrion request %s: status %s body %s", url, result.status, result.body
            )
        self._notify_result(result)

    def _notify_result(self, result: DispatchResult) -> None:
        if self._on_result is None:
            return
        try:
            self._on_result(result)
        except Exception as err:  # pylint: disable=broad-except
            _LOGGER.error("Zeptrion result callback failed: %s", err)

    # Websocket lifecycle handlers, bound to this instance.

    def _on_open(self) -> None:
        self._state = ConnectionState.OPEN
        _LOGGER.info("WebSocket to %s: open", self._address)

    def _on_close(self, code: int | None, reason: str | None) -> None:
        self._state = ConnectionState.CLOSED
        _LOGGER.info(
            "WebSocket to %s: closed; code: %s, reason: %s", self._address, code, reason
        )
        self._end_subscribers()

    def _on_error(self, error: BaseException | None) -> None:
        self._state = ConnectionState.CLOSED
        _LOGGER.warning("WebSocket to %s: error; %s", self._address, error)
        self._end_subscribers()

    def _on_message(self, data: str | bytes) -> None:
        _LOGGER.debug("WebSocket to %s: message %s", self._address, data)
        for queue in self._subscribers:
            if queue.full():
                _LOGGER.debug(
                    "WebSocket to %s: subscriber full, dropping message",
                    self._address,
                )
                continue
            queue.put_nowait(data)
        if self._on_message_cb is not None:
            try:
                self._on_message_cb(data)
            except Exception as err:  # pylint: disable=broad-except
                _LOGGER.error("Zeptrion message callback failed: %s", err)

    def _end_subscribers(self) -> None:
        for queue in self._subscribers:
            if queue.full():
                # Make room for the end marker.
                queue.get_nowait()
            queue.put_nowait(None)
        self._subscribers.clear()

    async def _ws_worker(self) -> None:
        """Hold the websocket open and dispatch lifecycle events."""
        try:
            session = await self._get_session()
            async with session.ws_connect(
                self.ws_url, heartbeat=self._heartbeat
            ) as ws:
                self._ws = ws
                self._on_open()
                while True:
                    msg = await ws.receive()
                    if msg.type in (WSMsgType.TEXT, WSMsgType.BINARY):
                        self._on_message(msg.data)
                    elif msg.type == WSMsgType.ERROR:
                        self._on_error(ws.exception() or msg.data)
                        return
                    elif msg.type in _CLOSE_TYPES:
                        code = msg.data if msg.type == WSMsgType.CLOSE else ws.close_code
                        self._on_close(code, msg.extra)
                        return
        except asyncio.CancelledError:
            raise
        except Exception as err:  # pylint: disable=broad-except
            self._on_error(err)
        finally:
            self._ws = None
