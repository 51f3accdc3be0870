from __future__ import annotations

from oscarbot.domain.enums import FulfillmentState
from oscarbot.domain.lex import CloseAction, DialogResponse, ElicitSlotAction, LexEvent, Message


def plain_text(content: str) -> Message:
    return Message(content=content)


def elicit_slot(event: LexEvent, slot_name: str, message: str) -> DialogResponse:
    return DialogResponse(
        session_attributes=event.session_attributes,
        dialog_action=ElicitSlotAction(
            intent_name=event.intent_name,
            slots=event.slots,
            slot_to_elicit=slot_name,
            message=plain_text(message),
        ),
    )


def close(event: LexEvent, state: FulfillmentState, message: str) -> DialogResponse:
    return DialogResponse(
        session_attributes=event.session_attributes,
        dialog_action=CloseAction(fulfillment_state=state, message=plain_text(message)),
    )


def fulfilled(event: LexEvent, message: str) -> DialogResponse:
    return close(event, FulfillmentState.FULFILLED, message)


def failed(event: LexEvent, message: str) -> DialogResponse:
    return close(event, FulfillmentState.FAILED, message)
