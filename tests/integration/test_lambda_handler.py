from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from oscarbot import main
from oscarbot.core.config import Settings
from oscarbot.core.container import AppContainer
from oscarbot.intents.router import UnknownIntentError


@pytest.fixture
def lambda_container(monkeypatch: pytest.MonkeyPatch, fake_github: Any) -> None:
    def _from_settings(cls: type[AppContainer], settings: Settings) -> AppContainer:
        return cls(settings=settings, github_client=fake_github)

    monkeypatch.setattr(AppContainer, "from_settings", classmethod(_from_settings))
    monkeypatch.setattr(main, "setup_logging", lambda level, json_logs: None)


def test_lambda_handler_asks_for_confirmation(
    lambda_container: None,
    fake_github: Any,
    event_payload: Callable[..., dict[str, Any]],
) -> None:
    payload = main.lambda_handler(event_payload(), None)

    assert payload["dialogAction"]["type"] == "ConfirmIntent"
    assert payload["sessionAttributes"] == {"Repository": "octocat/Hello-World"}
    assert fake_github.logins == []


def test_lambda_handler_stars_confirmed_repository(
    lambda_container: None,
    fake_github: Any,
    event_payload: Callable[..., dict[str, Any]],
) -> None:
    payload = main.lambda_handler(event_payload(confirmation_status="Confirmed"), None)

    assert payload["dialogAction"]["type"] == "Close"
    assert payload["dialogAction"]["fulfillmentState"] == "Fulfilled"
    assert fake_github.puts == [("gho_test", "/user/starred/octocat/Hello-World")]


def test_lambda_handler_reraises_unknown_intent(
    lambda_container: None,
    event_payload: Callable[..., dict[str, Any]],
) -> None:
    with pytest.raises(UnknownIntentError):
        main.lambda_handler(event_payload(intent_name="OrderPizza"), None)
