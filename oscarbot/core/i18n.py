from __future__ import annotations

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "star_project.request_username": "What is your GitHub username?",
        "star_project.request_password": "What is your GitHub password?",
        "star_project.confirm": "Are you sure you want me to star {repository} as {username}?",
        "star_project.declined": "Ok, I will not star the repository.",
        "star_project.success": "I have starred {repository} for you.",
        "star_project.failed": "Sorry, there was a problem starring the project.",
        "card.confirm.title": "Confirm",
        "card.yes": "Yes",
        "card.no": "No",
    },
}


def _language(locale: str | None) -> str:
    if not locale:
        return DEFAULT_LOCALE
    # en-US, en_GB -> en
    return locale.replace("_", "-").split("-", 1)[0].lower()


def translate(key: str, locale: str | None = None, **params: object) -> str:
    catalog = MESSAGES.get(_language(locale), MESSAGES[DEFAULT_LOCALE])
    template = catalog.get(key)
    if template is None:
        template = MESSAGES[DEFAULT_LOCALE][key]
    return template.format(**params) if params else template
