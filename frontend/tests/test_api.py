import unittest
from unittest.mock import MagicMock

import requests

from frontend.api import ApiClient, create_api_client
from frontend.config import ClientSettings
from frontend.errors import ApiError


def _response(status_code=200, json_data=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


class ApiClientTests(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = ApiClient(
            "http://api.test/", timeout=5, session=self.session
        )

    def test_get_joins_base_url_and_decodes_json(self):
        self.session.get.return_value = _response(json_data=[{"id": 1}])
        data = self.client.get("/users")
        self.assertEqual(data, [{"id": 1}])
        self.session.get.assert_called_once_with(
            "http://api.test/users", params=None, timeout=5
        )

    def test_http_error_status_raises_api_error(self):
        self.session.get.return_value = _response(status_code=404)
        with self.assertRaises(ApiError) as ctx:
            self.client.get("/users")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_transport_error_raises_api_error(self):
        self.session.get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(ApiError) as ctx:
            self.client.get("/users")
        self.assertIsNone(ctx.exception.status_code)

    def test_invalid_json_raises_api_error(self):
        self.session.get.return_value = _response(json_error=ValueError("bad"))
        with self.assertRaises(ApiError):
            self.client.get("/users")

    def test_without_credentials_cookies_are_cleared(self):
        client = ApiClient(
            "http://api.test", with_credentials=False, session=self.session
        )
        self.session.get.return_value = _response(json_data={})
        client.get("/")
        self.session.cookies.clear.assert_called_once_with()

    def test_create_from_settings(self):
        settings = ClientSettings(
            main_service_url="http://localhost:4000",
            request_timeout=2,
            with_credentials=False,
        )
        client = create_api_client(settings)
        self.assertEqual(client.url_for("/users"), "http://localhost:4000/users")
        self.assertEqual(client.timeout, 2)
        self.assertFalse(client.with_credentials)
        client.close()


if __name__ == "__main__":
    unittest.main()
