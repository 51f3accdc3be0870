from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import quote
from uuid import uuid4

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from oscarbot.integrations.github.base import GitHubAuthError, GitHubClient, GitHubStarError

STAR_SUCCESS_STATUS = 204


class HTTPGitHubClient(GitHubClient):
    def __init__(
        self,
        base_url: str,
        user_agent: str = "oscarbot",
        timeout_seconds: float = 10.0,
        max_attempts: int = 1,
        token_scopes: Sequence[str] = ("public_repo",),
        token_note: str = "oscarbot star",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout_seconds
        self._max_attempts = max(1, max_attempts)
        self._token_scopes = list(token_scopes)
        self._token_note = token_note
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": self._user_agent,
            },
        )

    async def login(self, username: str, password: str) -> str:
        # Notes must be unique per GitHub account.
        payload = {
            "scopes": self._token_scopes,
            "note": f"{self._token_note} {uuid4().hex[:8]}",
        }
        async with self._client() as client:
            response = await client.post("/authorizations", auth=(username, password), json=payload)

        if response.status_code in {401, 403}:
            raise GitHubAuthError(username, response.status_code)
        response.raise_for_status()

        token = response.json().get("token")
        if not isinstance(token, str) or not token:
            raise GitHubAuthError(username, response.status_code)
        return token

    async def put(self, token: str, path: str) -> httpx.Response:
        headers = {"Authorization": f"token {token}", "Content-Length": "0"}
        async with self._client() as client:
            async for attempt in AsyncRetrying(
                reraise=True,
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
                retry=retry_if_exception_type(httpx.TransportError),
            ):
                with attempt:
                    response = await client.put(path, headers=headers)
        return response

    async def star_repository(self, token: str, repository: str) -> None:
        owner, _, name = repository.strip().strip("/").partition("/")
        if not owner or not name or "/" in name:
            msg = f"Repository must look like 'owner/name', got {repository!r}"
            raise ValueError(msg)

        response = await self.put(token, f"/user/starred/{quote(owner)}/{quote(name)}")
        if response.status_code != STAR_SUCCESS_STATUS:
            raise GitHubStarError(repository, response.status_code)
