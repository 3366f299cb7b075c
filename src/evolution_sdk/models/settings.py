"""Modelos de configuração por instância (settings, webhook, websocket,
rabbitmq, chatwoot, typebot)."""

from __future__ import annotations

from typing import Literal

from evolution_sdk.models.base import EvolutionModel

WebhookEvent = Literal[
    "APPLICATION_STARTUP",
    "QRCODE_UPDATED",
    "MESSAGES_SET",
    "MESSAGES_UPSERT",
    "MESSAGES_UPDATE",
    "MESSAGES_DELETE",
    "SEND_MESSAGE",
    "CONTACTS_SET",
    "CONTACTS_UPSERT",
    "CONTACTS_UPDATE",
    "PRESENCE_UPDATE",
    "CHATS_SET",
    "CHATS_UPSERT",
    "CHATS_UPDATE",
    "CHATS_DELETE",
    "GROUPS_UPSERT",
    "GROUP_UPDATE",
    "GROUP_PARTICIPANTS_UPDATE",
    "CONNECTION_UPDATE",
    "LABELS_EDIT",
    "LABELS_ASSOCIATION",
    "CALL",
    "TYPEBOT_START",
    "TYPEBOT_CHANGE_STATUS",
]

TypebotStatus = Literal["opened", "paused", "closed"]


class InstanceSettings(EvolutionModel):
    """Comportamento da instância (`/settings/*`)."""

    reject_call: bool | None = None
    msg_call: str | None = None
    groups_ignore: bool | None = None
    always_online: bool | None = None
    read_messages: bool | None = None
    sync_full_history: bool | None = None
    read_status: bool | None = None


class WebhookSettings(EvolutionModel):
    enabled: bool
    url: str | None = None
    webhook_by_events: bool | None = None
    webhook_base64: bool | None = None
    events: list[WebhookEvent] | None = None


class WebsocketConfig(EvolutionModel):
    enabled: bool
    events: list[WebhookEvent] | None = None


class RabbitmqSettings(EvolutionModel):
    enabled: bool
    events: list[WebhookEvent] | None = None


class ChatwootSettings(EvolutionModel):
    enabled: bool
    account_id: str | None = None
    token: str | None = None
    url: str | None = None
    sign_msg: bool | None = None
    reopen_conversation: bool | None = None
    conversation_pending: bool | None = None
    name_inbox: str | None = None
    merge_brazil_contacts: bool | None = None
    import_contacts: bool | None = None
    import_messages: bool | None = None
    days_limit_import_messages: int | None = None
    sign_delimiter: str | None = None
    auto_create: bool | None = None
    organization: str | None = None
    logo: str | None = None
    ignore_jids: list[str] | None = None


class TypebotSettings(EvolutionModel):
    enabled: bool | None = None
    url: str | None = None
    expire: int | None = None
    keyword_finish: str | None = None
    delay_message: int | None = None
    unknown_message: str | None = None
    listening_from_me: bool | None = None
    stop_bot_from_me: bool | None = None
    keep_open: bool | None = None
    debounce_time: int | None = None
    ignore_jids: list[str] | None = None
    typebot_id_fallback: str | None = None


class TypebotStatusChange(EvolutionModel):
    remote_jid: str
    status: TypebotStatus
