import asyncio
import json
import unittest

import httpx

from driveexport.errors import OperationFailedError
from driveexport.ipc import (
    OPERATION_ERROR,
    OPERATION_RESULT,
    DriveMessageHandler,
    DriveRequestClient,
)
from driveexport.service import DriveExportService
from driveexport.settings import DriveExportSettings


class RecordingSender:
    def __init__(self) -> None:
        self.sent = []

    def send(self, channel, request_id, payload) -> None:
        self.sent.append((channel, request_id, payload))


class Loopback:
    """Connects a request client and a message handler inside one event loop."""

    def __init__(self) -> None:
        self.client: DriveRequestClient | None = None
        self.handler: DriveMessageHandler | None = None
        self.tasks: list[asyncio.Task] = []

    def to_handler(self, channel, request_id, payload) -> None:
        task = asyncio.get_running_loop().create_task(
            self.handler.handle(channel, request_id, payload)
        )
        self.tasks.append(task)

    def to_client(self, channel, request_id, payload) -> None:
        if channel == OPERATION_RESULT:
            self.client.on_result(request_id, payload)
        elif channel == OPERATION_ERROR:
            self.client.on_error(request_id, payload)


class Sender:
    def __init__(self, func) -> None:
        self._func = func

    def send(self, channel, request_id, payload) -> None:
        self._func(channel, request_id, payload)


class FakeAuthorizer:
    async def authorize(self, config=None, *, interactive=False):
        return "tok"


class TestDriveRequestClient(unittest.IsolatedAsyncioTestCase):
    async def test_save_file_builds_meta_without_root(self) -> None:
        sender = RecordingSender()
        client = DriveRequestClient(sender)

        task = asyncio.create_task(
            client.save_file(
                {"a": 1},
                "export.json",
                content_type="application/json",
                parents=["My Drive", None, "Backups", {"name": "my drive"}, {"id": "P1"}],
            )
        )
        await asyncio.sleep(0)

        channel, request_id, payload = sender.sent[0]
        self.assertEqual(channel, "save-file")
        self.assertEqual(
            payload,
            {
                "meta": {"name": "export.json", "parents": ["Backups", {"id": "P1"}]},
                "body": {"a": 1},
                "type": "application/json",
            },
        )

        client.on_result(request_id, {"id": "F1"})
        self.assertEqual(await task, {"id": "F1"})

    async def test_only_root_parent_sends_no_parents(self) -> None:
        sender = RecordingSender()
        client = DriveRequestClient(sender)

        task = asyncio.create_task(client.save_file("x", "a.txt", parents=["My Drive"]))
        await asyncio.sleep(0)

        _, request_id, payload = sender.sent[0]
        self.assertNotIn("parents", payload["meta"])
        client.on_error(request_id, {"message": "nope"})
        with self.assertRaisesRegex(OperationFailedError, "nope"):
            await task


class TestRoundTripThroughHandler(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.requests: list[httpx.Request] = []

        def drive(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if request.url.path.startswith("/upload/") and request.method == "POST":
                return httpx.Response(200, headers={"location": "https://upload/S1"})
            if request.method == "PUT":
                return httpx.Response(200, json={"id": "F1", "name": "a.json"})
            if request.method == "POST":
                return httpx.Response(200, json={"id": "NF1"})
            return httpx.Response(
                404,
                json={"error": {"code": 404, "message": "File not found"}},
            )

        self.http = httpx.AsyncClient(transport=httpx.MockTransport(drive))
        service = DriveExportService(
            DriveExportSettings(_env_file=None),
            authorizer=FakeAuthorizer(),
            client=self.http,
        )
        self.loop = Loopback()
        self.loop.client = DriveRequestClient(Sender(self.loop.to_handler))
        self.loop.handler = DriveMessageHandler(service, Sender(self.loop.to_client))

    async def asyncTearDown(self) -> None:
        await self.http.aclose()

    async def test_concurrent_requests_do_not_cross(self) -> None:
        client = self.loop.client

        saved, missing = await asyncio.gather(
            client.save_file({"k": 1}, "a.json", parents=["Backups"]),
            client.get_file("nope"),
            return_exceptions=True,
        )

        self.assertEqual(saved["id"], "F1")
        self.assertEqual(saved["parents"], [{"name": "Backups", "id": "NF1"}])
        self.assertIsInstance(missing, OperationFailedError)
        self.assertEqual(str(missing), "404: File not found")
        self.assertEqual(client.correlator.pending_count, 0)

        session = [r for r in self.requests if r.url.path.startswith("/upload/")][0]
        self.assertEqual(json.loads(session.content)["parents"], ["NF1"])


if __name__ == "__main__":
    unittest.main()
