from enum import StrEnum


class Intent(StrEnum):
    STAR_PROJECT = "StarProject"


class ConfirmationStatus(StrEnum):
    NONE = "None"
    CONFIRMED = "Confirmed"
    DENIED = "Denied"


class DialogActionType(StrEnum):
    ELICIT_SLOT = "ElicitSlot"
    CONFIRM_INTENT = "ConfirmIntent"
    CLOSE = "Close"
    DELEGATE = "Delegate"


class FulfillmentState(StrEnum):
    FULFILLED = "Fulfilled"
    FAILED = "Failed"


class ContentType(StrEnum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"
    CUSTOM_PAYLOAD = "CustomPayload"
