"""Pairs outbound requests with their asynchronous results by request id."""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass
from typing import Any

from driveexport.errors import OperationFailedError
from driveexport.util.log import get_logger

from .channels import MessageSender

logger = get_logger(__name__)


@dataclass(slots=True)
class PendingOperation:
    """An outstanding request waiting for its result."""

    id: int
    channel: str
    future: asyncio.Future


class RequestCorrelator:
    """
    Tracks pending requests keyed by a monotonically increasing id.

    Each id moves from dispatched to resolved or rejected exactly once.
    Results for unknown, already settled or duplicate ids are dropped.
    """

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender
        self._counter = itertools.count(1)
        self._pending: dict[int, PendingOperation] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def is_pending(self, request_id: int) -> bool:
        return request_id in self._pending

    def dispatch(self, channel: str, payload: Any) -> tuple[int, asyncio.Future]:
        """
        Send `payload` on `channel` under a new request id.

        Returns:
            (request_id, future) where the future settles on the matching
            `on_result` / `on_error` call.
        """
        loop = asyncio.get_running_loop()
        request_id = next(self._counter)
        future = loop.create_future()
        # Registered before sending so a synchronous reply still finds it.
        self._pending[request_id] = PendingOperation(request_id, channel, future)

        try:
            self._sender.send(channel, request_id, payload)
        except Exception:
            self._pending.pop(request_id, None)
            raise

        return request_id, future

    async def request(self, channel: str, payload: Any) -> Any:
        """Dispatch and wait for the result."""
        _, future = self.dispatch(channel, payload)
        return await future

    def on_result(self, request_id: int, result: Any) -> None:
        op = self._pending.pop(request_id, None)
        if op is None:
            logger.debug(f"Dropping result for unknown request {request_id}")
            return
        if not op.future.done():
            op.future.set_result(result)

    def on_error(self, request_id: int, cause: Any) -> None:
        op = self._pending.pop(request_id, None)
        if op is None:
            logger.debug(f"Dropping error for unknown request {request_id}")
            return
        if not op.future.done():
            op.future.set_exception(_to_exception(cause, op))


def _to_exception(cause: Any, op: PendingOperation) -> BaseException:
    if isinstance(cause, BaseException):
        return cause

    if isinstance(cause, dict):
        message = cause.get("message") or "Operation failed"
        details = dict(cause)
    else:
        message = str(cause) if cause else "Operation failed"
        details = {"cause": cause}

    details.update({"request_id": op.id, "channel": op.channel})
    return OperationFailedError(str(message), details=details)
