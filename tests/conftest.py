from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from oscarbot.domain.lex import LexEvent
from oscarbot.integrations.github.base import GitHubStarError


class FakeGitHub:
    def __init__(
        self,
        token: str = "gho_test",
        star_status: int = 204,
        login_error: Exception | None = None,
    ) -> None:
        self.token = token
        self.star_status = star_status
        self.login_error = login_error
        self.logins: list[tuple[str, str]] = []
        self.puts: list[tuple[str, str]] = []

    async def login(self, username: str, password: str) -> str:
        self.logins.append((username, password))
        if self.login_error is not None:
            raise self.login_error
        return self.token

    async def put(self, token: str, path: str) -> httpx.Response:
        self.puts.append((token, path))
        return httpx.Response(self.star_status)

    async def star_repository(self, token: str, repository: str) -> None:
        response = await self.put(token, f"/user/starred/{repository}")
        if response.status_code != 204:
            raise GitHubStarError(repository, response.status_code)


def build_event_payload(
    *,
    username: str | None = "alice",
    password: str | None = "s3cret",
    confirmation_status: str = "None",
    repository: str | None = "octocat/Hello-World",
    intent_name: str = "StarProject",
) -> dict[str, Any]:
    session_attributes: dict[str, str] = {}
    if repository is not None:
        session_attributes["Repository"] = repository
    return {
        "messageVersion": "1.0",
        "invocationSource": "DialogCodeHook",
        "userId": "user-1",
        "inputTranscript": "star it",
        "outputDialogMode": "Text",
        "bot": {"name": "Oscar", "alias": "$LATEST", "version": "$LATEST"},
        "currentIntent": {
            "name": intent_name,
            "slots": {"GitHubUsername": username, "GitHubPassword": password},
            "confirmationStatus": confirmation_status,
        },
        "sessionAttributes": session_attributes,
    }


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def make_event() -> Callable[..., LexEvent]:
    def _make(**kwargs: Any) -> LexEvent:
        return LexEvent.model_validate(build_event_payload(**kwargs))

    return _make


@pytest.fixture
def event_payload() -> Callable[..., dict[str, Any]]:
    return build_event_payload
