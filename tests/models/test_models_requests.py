import unittest

from driveexport.models import MediaPayload, SaveRequest


class TestMediaPayload(unittest.TestCase):
    def test_string_body_kept(self) -> None:
        media = MediaPayload.build("test-string", "test-type")
        self.assertEqual(media.body, "test-string")
        self.assertEqual(media.mime_type, "test-type")

    def test_structured_bodies_serialized(self) -> None:
        self.assertEqual(MediaPayload.build({"a": 1}, "x").body, '{"a": 1}')
        self.assertEqual(MediaPayload.build([1, 2], "x").body, "[1, 2]")
        self.assertEqual(MediaPayload.build(None, "x").body, "null")
        self.assertEqual(MediaPayload.build(3, "x").body, "3")


class TestSaveRequest(unittest.TestCase):
    def test_from_payload(self) -> None:
        request = SaveRequest.from_payload(
            {
                "meta": {"name": "a"},
                "body": {"k": 1},
                "type": "application/json",
                "id": "F1",
                "auth": {"accessToken": "t"},
            }
        )
        self.assertEqual(request.meta, {"name": "a"})
        self.assertEqual(request.body, {"k": 1})
        self.assertEqual(request.type, "application/json")
        self.assertEqual(request.id, "F1")
        self.assertEqual(request.auth.access_token, "t")

    def test_from_payload_empty_id_is_none(self) -> None:
        request = SaveRequest.from_payload({"body": "x", "id": ""})
        self.assertIsNone(request.id)
        self.assertIsNone(request.auth)

    def test_from_payload_rejects_bad_meta(self) -> None:
        with self.assertRaises(TypeError):
            SaveRequest.from_payload({"meta": ["x"]})


if __name__ == "__main__":
    unittest.main()
