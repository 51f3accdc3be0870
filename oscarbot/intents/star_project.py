from __future__ import annotations

import asyncio

import structlog
from structlog.contextvars import bound_contextvars

from oscarbot.core.i18n import translate
from oscarbot.dialog import responses
from oscarbot.dialog.actions import build_response_card, confirm_intent
from oscarbot.domain.enums import ConfirmationStatus
from oscarbot.domain.lex import Button, DialogResponse, LexEvent
from oscarbot.integrations.github.base import GitHubClient

logger = structlog.get_logger(__name__)

USERNAME_SLOT = "GitHubUsername"
PASSWORD_SLOT = "GitHubPassword"
REPOSITORY_ATTRIBUTE = "Repository"


class StarProjectHandler:
    """Stars the repository held in the session as the GitHub user named in the slots.

    One call handles one conversational turn and always returns exactly one dialog
    response; failures of the GitHub calls become a ``Failed`` close.
    """

    def __init__(self, github: GitHubClient, timeout_seconds: float = 25.0, locale: str = "en") -> None:
        self._github = github
        self._timeout = timeout_seconds
        self._locale = locale

    async def handle(self, event: LexEvent) -> DialogResponse:
        username = event.slot(USERNAME_SLOT)
        password = event.slot(PASSWORD_SLOT)

        if username is None:
            return responses.elicit_slot(event, USERNAME_SLOT, self._t("star_project.request_username"))
        if password is None:
            return responses.elicit_slot(event, PASSWORD_SLOT, self._t("star_project.request_password"))

        repository = event.session_attributes.get(REPOSITORY_ATTRIBUTE, "")
        status = event.confirmation_status
        if status == ConfirmationStatus.DENIED:
            return responses.fulfilled(event, self._t("star_project.declined"))
        if not repository.strip():
            logger.warning("star_project.missing_repository", github_username=username)
            return responses.failed(event, self._t("star_project.failed"))
        if status == ConfirmationStatus.NONE:
            return self._confirm(event, repository=repository, username=username)

        with bound_contextvars(repository=repository, github_username=username):
            try:
                async with asyncio.timeout(self._timeout):
                    token = await self._github.login(username, password)
                    await self._github.star_repository(token, repository)
            except Exception as exc:
                logger.exception("star_project.failed", error=str(exc))
                return responses.failed(event, self._t("star_project.failed"))

            logger.info("star_project.starred")
        return responses.fulfilled(event, self._t("star_project.success", repository=repository))

    def _confirm(self, event: LexEvent, *, repository: str, username: str) -> DialogResponse:
        card = build_response_card(
            self._t("card.confirm.title"),
            None,
            [
                Button(text=self._t("card.yes"), value="Yes"),
                Button(text=self._t("card.no"), value="No"),
            ],
        )
        return confirm_intent(
            event.session_attributes,
            event.intent_name,
            event.slots,
            responses.plain_text(self._t("star_project.confirm", repository=repository, username=username)),
            card,
        )

    def _t(self, key: str, **params: object) -> str:
        return translate(key, self._locale, **params)
