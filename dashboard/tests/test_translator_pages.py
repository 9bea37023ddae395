"""
/**
 * @file dashboard/tests/test_translator_pages.py
 * @description Dashboard and translator page rendering.
 */
"""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from dashboard.config import Settings, get_settings
from dashboard.controllers.translator_controller import get_translator_view
from dashboard.main import app
from dashboard.services.proxy_service import ProxyResponse
from dashboard.services.translator_view_service import ProxyClient, TranslatorView

DISABLED_BUTTON = 'id="translate" type="submit" disabled>'


class TestTranslatorPage(unittest.TestCase):
    def setUp(self):
        self.proxy = MagicMock(spec=ProxyClient)
        app.dependency_overrides[get_translator_view] = lambda: TranslatorView(self.proxy)
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def test_auto_load_from_record_id(self):
        self.proxy.prepare.return_value = ProxyResponse(200, {"text": "Lieferung am Montag", "status": "ok"})

        r = self.client.get("/translator", params={"recordId": "42"})

        self.assertEqual(r.status_code, 200)
        self.proxy.prepare.assert_called_once_with({"recordId": "42", "table": "dab065"})
        self.proxy.translate.assert_not_called()
        self.assertIn(">Lieferung am Montag</textarea>", r.text)
        self.assertNotIn(DISABLED_BUTTON, r.text)

    def test_auto_load_error_is_shown(self):
        self.proxy.prepare.return_value = ProxyResponse(500, {"error": "N8N_PREPARE_WEBHOOK_URL nicht konfiguriert"})

        r = self.client.get("/translator", params={"recordId": "42", "table": "dab010"})

        self.assertEqual(r.status_code, 200)
        self.proxy.prepare.assert_called_once_with({"recordId": "42", "table": "dab010"})
        self.assertIn("N8N_PREPARE_WEBHOOK_URL nicht konfiguriert", r.text)
        self.assertIn(DISABLED_BUTTON, r.text)

    def test_empty_page(self):
        r = self.client.get("/translator")

        self.assertEqual(r.status_code, 200)
        self.assertIn(DISABLED_BUTTON, r.text)
        self.proxy.prepare.assert_not_called()

    def test_blank_submit_makes_no_call(self):
        r = self.client.post("/translator", data={"text": "   ", "sourceLang": "en"})

        self.assertEqual(r.status_code, 200)
        self.assertIn(DISABLED_BUTTON, r.text)
        self.proxy.translate.assert_not_called()

    def test_submit_translates(self):
        self.proxy.translate.return_value = ProxyResponse(200, {"translation": "Hallo"})

        r = self.client.post("/translator", data={"text": "Hello", "sourceLang": "en"})

        self.assertEqual(r.status_code, 200)
        self.proxy.translate.assert_called_once_with({"text": "Hello", "sourceLang": "en", "targetLang": "de"})
        self.assertIn(">Hallo</textarea>", r.text)
        self.assertIn(">Hello</textarea>", r.text)

    def test_submit_error_is_shown(self):
        self.proxy.translate.return_value = ProxyResponse(502, {"error": "n8n Webhook Fehler: 500"})

        r = self.client.post("/translator", data={"text": "Hello", "sourceLang": "auto"})

        self.assertIn("Fehler: 502", r.text)
        self.proxy.translate.assert_called_once_with({"text": "Hello", "targetLang": "de"})

    def test_restored_page_resets_submit_button(self):
        r = self.client.get("/translator")

        self.assertIn('addEventListener("pageshow"', r.text)
        self.assertIn("delete button.dataset.loading;", r.text)

    def test_target_language_not_offered_as_source(self):
        r = self.client.get("/translator")

        self.assertNotIn('<option value="de"', r.text)
        self.assertIn('<option value="en" selected>', r.text)


class TestTranslatorPageEndToEnd(unittest.TestCase):
    def setUp(self):
        app.dependency_overrides[get_settings] = lambda: Settings(
            raw={"webhooks": {"prepare": "http://n8n.test/prepare", "translate": "http://n8n.test/translate"}}
        )
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    @patch("dashboard.services.webhook_forward_service.requests.post")
    def test_record_id_reaches_prepare_webhook_once(self, mock_post):
        resp = MagicMock()
        resp.status_code = 200
        resp.json.return_value = {"text": "Memo Inhalt", "status": "ok"}
        mock_post.return_value = resp

        r = self.client.get("/translator?recordId=42")

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "http://n8n.test/prepare")
        self.assertEqual(kwargs["json"], {"recordId": "42", "table": "dab065"})
        self.assertIn(">Memo Inhalt</textarea>", r.text)


class TestDashboardPage(unittest.TestCase):
    def test_index_lists_translator(self):
        r = TestClient(app).get("/")

        self.assertEqual(r.status_code, 200)
        self.assertIn('href="/translator"', r.text)
        self.assertIn("Texte übersetzen via n8n Workflow", r.text)
        self.assertIn("<title>WM Tools</title>", r.text)


if __name__ == "__main__":
    unittest.main()
