from __future__ import annotations

from dataclasses import dataclass

from oscarbot.core.config import Settings
from oscarbot.domain.enums import Intent
from oscarbot.integrations.github.base import GitHubClient
from oscarbot.integrations.github.client import HTTPGitHubClient
from oscarbot.intents.router import IntentRouter
from oscarbot.intents.star_project import StarProjectHandler


@dataclass(slots=True)
class AppContainer:
    settings: Settings
    github_client: GitHubClient

    @classmethod
    def from_settings(cls, settings: Settings) -> AppContainer:
        github_client = HTTPGitHubClient(
            base_url=settings.github_api_url,
            user_agent=settings.github_user_agent,
            timeout_seconds=settings.github_timeout_seconds,
            max_attempts=settings.github_max_attempts,
            token_scopes=settings.github_token_scopes,
            token_note=settings.github_token_note,
        )
        return cls(settings=settings, github_client=github_client)

    def create_star_project_handler(self) -> StarProjectHandler:
        return StarProjectHandler(
            self.github_client,
            timeout_seconds=self.settings.handler_timeout_seconds,
            locale=self.settings.default_locale,
        )

    def create_intent_router(self) -> IntentRouter:
        router = IntentRouter()
        router.register(Intent.STAR_PROJECT, self.create_star_project_handler().handle)
        return router
