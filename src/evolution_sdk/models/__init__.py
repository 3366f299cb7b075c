"""Modelos de request da Evolution API.

Um schema canônico por recurso; respostas são devolvidas como JSON
decodificado (dict/list).
"""

from evolution_sdk.models.base import EvolutionModel, Payload, dump_payload
from evolution_sdk.models.group import ParticipantAction
from evolution_sdk.models.instance import CreateInstanceOptions, Presence
from evolution_sdk.models.label import HandleLabelOptions, LabelAction
from evolution_sdk.models.message import (
    AudioMessageOptions,
    BaseMessageOptions,
    ButtonCall,
    ButtonCopy,
    ButtonPix,
    ButtonReply,
    ButtonsMessageOptions,
    ButtonUrl,
    ContactInfo,
    ContactMessageOptions,
    ListMessageOptions,
    ListRow,
    ListSection,
    LocationMessageOptions,
    MediaMessageOptions,
    MessageKey,
    PollMessageOptions,
    PtvMessageOptions,
    QuotedKey,
    QuotedMessage,
    ReactionMessageOptions,
    StatusMessageOptions,
    StickerMessageOptions,
    TextMessageOptions,
)
from evolution_sdk.models.profile import PrivacySettings
from evolution_sdk.models.settings import (
    ChatwootSettings,
    InstanceSettings,
    RabbitmqSettings,
    TypebotSettings,
    TypebotStatusChange,
    WebhookEvent,
    WebhookSettings,
    WebsocketConfig,
)

__all__ = [
    "AudioMessageOptions",
    "BaseMessageOptions",
    "ButtonCall",
    "ButtonCopy",
    "ButtonPix",
    "ButtonReply",
    "ButtonUrl",
    "ButtonsMessageOptions",
    "ChatwootSettings",
    "ContactInfo",
    "ContactMessageOptions",
    "CreateInstanceOptions",
    "EvolutionModel",
    "HandleLabelOptions",
    "InstanceSettings",
    "LabelAction",
    "ListMessageOptions",
    "ListRow",
    "ListSection",
    "LocationMessageOptions",
    "MediaMessageOptions",
    "MessageKey",
    "ParticipantAction",
    "Payload",
    "PollMessageOptions",
    "Presence",
    "PrivacySettings",
    "PtvMessageOptions",
    "QuotedKey",
    "QuotedMessage",
    "RabbitmqSettings",
    "ReactionMessageOptions",
    "StatusMessageOptions",
    "StickerMessageOptions",
    "TextMessageOptions",
    "TypebotSettings",
    "TypebotStatusChange",
    "WebhookEvent",
    "WebhookSettings",
    "WebsocketConfig",
    "dump_payload",
]
