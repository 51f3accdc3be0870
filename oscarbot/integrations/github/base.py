from typing import Protocol

import httpx


class GitHubError(Exception):
    pass


class GitHubAuthError(GitHubError):
    def __init__(self, username: str, status_code: int | None = None) -> None:
        super().__init__(f"GitHub login failed for {username!r} (status={status_code})")
        self.username = username
        self.status_code = status_code


class GitHubStarError(GitHubError):
    def __init__(self, repository: str, status_code: int) -> None:
        super().__init__(f"GitHub refused to star {repository!r} (status={status_code})")
        self.repository = repository
        self.status_code = status_code


class GitHubClient(Protocol):
    async def login(self, username: str, password: str) -> str:
        ...

    async def put(self, token: str, path: str) -> httpx.Response:
        ...

    async def star_repository(self, token: str, repository: str) -> None:
        ...
