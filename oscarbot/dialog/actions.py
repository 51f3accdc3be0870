"""Builders for the dialog actions understood by the Lex dialog engine."""

from __future__ import annotations

from collections.abc import Sequence

from oscarbot.domain.lex import (
    Button,
    ConfirmIntentAction,
    DelegateAction,
    DialogResponse,
    GenericAttachment,
    Message,
    ResponseCard,
    SessionAttributes,
    Slots,
)

MAX_CARD_BUTTONS = 5


def confirm_intent(
    session_attributes: SessionAttributes,
    intent_name: str,
    slots: Slots,
    message: Message | None,
    response_card: ResponseCard | None = None,
) -> DialogResponse:
    return DialogResponse(
        session_attributes=session_attributes,
        dialog_action=ConfirmIntentAction(
            intent_name=intent_name,
            slots=slots,
            message=message,
            response_card=response_card,
        ),
    )


def delegate(session_attributes: SessionAttributes, slots: Slots) -> DialogResponse:
    return DialogResponse(
        session_attributes=session_attributes,
        dialog_action=DelegateAction(slots=slots),
    )


def build_response_card(title: str, sub_title: str | None, options: Sequence[Button] | None) -> ResponseCard:
    """Build a generic card whose options are rendered as buttons.

    The platform renders at most five buttons, so anything past the fifth option is
    dropped. ``options=None`` yields a card without buttons.
    """
    buttons: list[Button] | None = None
    if options is not None:
        buttons = list(options[:MAX_CARD_BUTTONS])
    return ResponseCard(
        generic_attachments=[GenericAttachment(title=title, sub_title=sub_title, buttons=buttons)],
    )
