from unittest.mock import MagicMock, patch

import pytest
import requests

from marketing_site.notifications.email import RESEND_URL, send_email

MESSAGE = {
    "to": "sales@example.com",
    "from_address": "Website <noreply@example.com>",
    "reply_to": "mario@example.com",
    "subject": "Hello",
    "html": "<p>Hello</p>",
}


@pytest.fixture
def configured(app):
    app.config["RESEND_API_KEY"] = "re_test"
    with app.app_context():
        yield


def test_skipped_without_api_key(app):
    with app.app_context(), patch("marketing_site.notifications.email.requests.post") as post:
        result = send_email(**MESSAGE)

    assert result.skipped is True
    assert result.success is False
    post.assert_not_called()


@pytest.mark.usefixtures("configured")
class TestSendEmail:
    def test_success(self):
        response = MagicMock(status_code=200, text="{}")
        with patch("marketing_site.notifications.email.requests.post", return_value=response) as post:
            result = send_email(**MESSAGE)

        assert result.success is True
        assert post.call_args.args[0] == RESEND_URL
        assert post.call_args.kwargs["json"]["from"] == MESSAGE["from_address"]
        assert post.call_args.kwargs["timeout"] == 10

    def test_api_error(self):
        response = MagicMock(status_code=422, text="invalid from address")
        with patch("marketing_site.notifications.email.requests.post", return_value=response):
            result = send_email(**MESSAGE)

        assert result.success is False
        assert "422" in result.error
        assert "invalid from address" in result.error

    def test_network_error(self):
        with patch(
            "marketing_site.notifications.email.requests.post",
            side_effect=requests.Timeout("timed out"),
        ):
            result = send_email(**MESSAGE)

        assert result.success is False
        assert result.skipped is False
        assert "timed out" in result.error
