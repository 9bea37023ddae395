import unittest

from fastapi.testclient import TestClient

from dashboard.config import Settings, get_settings
from dashboard.main import app


class TestHealth(unittest.TestCase):
    def setUp(self):
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def test_degraded_without_webhooks(self):
        app.dependency_overrides[get_settings] = lambda: Settings(raw={})

        resp = self.client.get("/health").json()

        self.assertEqual(resp["status"], "degraded")
        self.assertEqual(resp["checks"]["webhooks"], {"prepare": False, "translate": False})

    def test_ok_with_webhooks(self):
        app.dependency_overrides[get_settings] = lambda: Settings(
            raw={"webhooks": {"prepare": "https://n8n.test/prepare", "translate": "https://n8n.test/translate"}}
        )

        resp = self.client.get("/health").json()

        self.assertEqual(resp["status"], "ok")

    def test_invalid_url_is_not_healthy(self):
        app.dependency_overrides[get_settings] = lambda: Settings(
            raw={"webhooks": {"prepare": "n8n-prepare", "translate": "https://n8n.test/translate"}}
        )

        resp = self.client.get("/health").json()

        self.assertEqual(resp["status"], "degraded")
        self.assertFalse(resp["checks"]["webhooks"]["prepare"])


if __name__ == "__main__":
    unittest.main()
