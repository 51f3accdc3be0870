from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from oscarbot.domain.enums import ConfirmationStatus, ContentType, DialogActionType, FulfillmentState

GENERIC_CARD_CONTENT_TYPE = "application/vnd.amazonaws.card.generic"

Slots = dict[str, str | None]
SessionAttributes = dict[str, str]


class LexModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CurrentIntent(LexModel):
    name: str
    slots: Slots = Field(default_factory=dict)
    confirmation_status: ConfirmationStatus = Field(
        default=ConfirmationStatus.NONE,
        alias="confirmationStatus",
    )

    @field_validator("slots", mode="before")
    @classmethod
    def default_slots(cls, value: Any) -> Any:
        return {} if value is None else value


class BotInfo(LexModel):
    name: str
    alias: str | None = None
    version: str | None = None


class LexEvent(LexModel):
    current_intent: CurrentIntent = Field(alias="currentIntent")
    session_attributes: SessionAttributes = Field(default_factory=dict, alias="sessionAttributes")
    request_attributes: dict[str, str] = Field(default_factory=dict, alias="requestAttributes")
    message_version: str = Field(default="1.0", alias="messageVersion")
    invocation_source: Literal["DialogCodeHook", "FulfillmentCodeHook"] = Field(
        default="FulfillmentCodeHook",
        alias="invocationSource",
    )
    user_id: str | None = Field(default=None, alias="userId")
    input_transcript: str | None = Field(default=None, alias="inputTranscript")
    output_dialog_mode: Literal["Text", "Voice"] = Field(default="Text", alias="outputDialogMode")
    bot: BotInfo | None = None

    @field_validator("session_attributes", "request_attributes", mode="before")
    @classmethod
    def default_attributes(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def intent_name(self) -> str:
        return self.current_intent.name

    @property
    def slots(self) -> Slots:
        return self.current_intent.slots

    @property
    def confirmation_status(self) -> ConfirmationStatus:
        return self.current_intent.confirmation_status

    def slot(self, name: str) -> str | None:
        """Return the slot value, or None when the slot is missing, empty or blank."""
        value = self.current_intent.slots.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()


class Message(LexModel):
    content_type: ContentType = Field(default=ContentType.PLAIN_TEXT, alias="contentType")
    content: str


class Button(LexModel):
    text: str
    value: str


class GenericAttachment(LexModel):
    title: str
    sub_title: str | None = Field(default=None, alias="subTitle")
    buttons: list[Button] | None = None


class ResponseCard(LexModel):
    content_type: Literal["application/vnd.amazonaws.card.generic"] = Field(
        default=GENERIC_CARD_CONTENT_TYPE,
        alias="contentType",
    )
    version: int = 1
    generic_attachments: list[GenericAttachment] = Field(alias="genericAttachments")


class ElicitSlotAction(LexModel):
    type: Literal[DialogActionType.ELICIT_SLOT] = DialogActionType.ELICIT_SLOT
    intent_name: str = Field(alias="intentName")
    slots: Slots
    slot_to_elicit: str = Field(alias="slotToElicit")
    message: Message | None = None
    response_card: ResponseCard | None = Field(default=None, alias="responseCard")


class ConfirmIntentAction(LexModel):
    type: Literal[DialogActionType.CONFIRM_INTENT] = DialogActionType.CONFIRM_INTENT
    intent_name: str = Field(alias="intentName")
    slots: Slots
    message: Message | None = None
    response_card: ResponseCard | None = Field(default=None, alias="responseCard")


class CloseAction(LexModel):
    type: Literal[DialogActionType.CLOSE] = DialogActionType.CLOSE
    fulfillment_state: FulfillmentState = Field(alias="fulfillmentState")
    message: Message | None = None
    response_card: ResponseCard | None = Field(default=None, alias="responseCard")


class DelegateAction(LexModel):
    type: Literal[DialogActionType.DELEGATE] = DialogActionType.DELEGATE
    slots: Slots


DialogAction = Annotated[
    ElicitSlotAction | ConfirmIntentAction | CloseAction | DelegateAction,
    Field(discriminator="type"),
]


class DialogResponse(LexModel):
    session_attributes: SessionAttributes = Field(default_factory=dict, alias="sessionAttributes")
    dialog_action: DialogAction = Field(alias="dialogAction")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
