"""
Тесты процессоров логирования.
"""

from ticket_bot.logging_config import add_app_context, filter_sensitive_data


class TestFilterSensitiveData:

    def test_token_redacted(self):
        event = filter_sensitive_data(
            None, "info", {"event": "bot_started", "bot_token": "42:secret", "user_id": 7}
        )

        assert event["bot_token"] == "[REDACTED]"
        assert event["event"] == "bot_started"
        assert event["user_id"] == 7

    def test_key_match_is_case_insensitive(self):
        event = filter_sensitive_data(None, "info", {"Authorization": "Bearer x"})

        assert event["Authorization"] == "[REDACTED]"

    def test_values_are_not_inspected(self):
        event = filter_sensitive_data(None, "info", {"error": "token rejected"})

        assert event["error"] == "token rejected"


def test_app_context():
    assert add_app_context(None, "info", {})["app"] == "ticket_bot"
