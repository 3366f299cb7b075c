"""Modelos de envio de mensagens (`/message/*`)."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field

from evolution_sdk.models.base import EvolutionModel

MediaType = Literal["image", "video", "document"]
StatusType = Literal["text", "image", "video", "audio"]
# 1=SERIF, 2=NORICAN_REGULAR, 3=BRYNDAN_WRITE, 4=BEBASNEUE_REGULAR, 5=OSWALD_HEAVY
StatusFont = Literal[1, 2, 3, 4, 5]
PixKeyType = Literal["phone", "email", "cpf", "cnpj", "random"]


class MessageKey(EvolutionModel):
    remote_jid: str
    from_me: bool
    id: str


class QuotedKey(EvolutionModel):
    id: str


class QuotedMessage(EvolutionModel):
    """Mensagem citada (reply)."""

    key: QuotedKey | None = None
    message: dict[str, Any] | None = None


class BaseMessageOptions(EvolutionModel):
    """Campos comuns a quase todos os envios.

    Attributes:
        number: Número ou JID do destinatário
        delay: Atraso em ms antes do envio (simula digitação)
        quoted: Mensagem a citar
        mentions_every_one: Menciona todos do grupo
        mentioned: Números a mencionar
    """

    number: str
    delay: int | None = None
    quoted: QuotedMessage | None = None
    mentions_every_one: bool | None = None
    mentioned: list[str] | None = None


class TextMessageOptions(BaseMessageOptions):
    text: str
    link_preview: bool | None = None


class MediaMessageOptions(BaseMessageOptions):
    """Imagem, vídeo ou documento. `media` aceita URL ou base64."""

    mediatype: MediaType
    media: str
    mimetype: str | None = None
    caption: str | None = None
    file_name: str | None = None


class AudioMessageOptions(BaseMessageOptions):
    """Nota de voz. `audio` aceita URL ou base64."""

    audio: str
    encoding: bool | None = None


class StickerMessageOptions(BaseMessageOptions):
    sticker: str


class LocationMessageOptions(BaseMessageOptions):
    name: str
    address: str
    latitude: float
    longitude: float


class ContactInfo(EvolutionModel):
    full_name: str
    wuid: str
    phone_number: str
    organization: str | None = None
    email: str | None = None
    url: str | None = None


class ContactMessageOptions(BaseMessageOptions):
    contact: list[ContactInfo]


class ReactionMessageOptions(EvolutionModel):
    """Reação a uma mensagem existente. Emoji vazio remove a reação."""

    key: MessageKey
    reaction: str


class PollMessageOptions(BaseMessageOptions):
    name: str
    selectable_count: int
    values: list[str]


class ListRow(EvolutionModel):
    title: str
    row_id: str
    description: str | None = None


class ListSection(EvolutionModel):
    title: str
    rows: list[ListRow]


class ListMessageOptions(BaseMessageOptions):
    title: str
    description: str
    button_text: str
    sections: list[ListSection]
    footer_text: str | None = None


class ButtonReply(EvolutionModel):
    type: Literal["reply"] = "reply"
    display_text: str
    id: str


class ButtonCopy(EvolutionModel):
    type: Literal["copy"] = "copy"
    display_text: str
    copy_code: str


class ButtonUrl(EvolutionModel):
    type: Literal["url"] = "url"
    display_text: str
    url: str


class ButtonCall(EvolutionModel):
    type: Literal["call"] = "call"
    display_text: str
    phone_number: str


class ButtonPix(EvolutionModel):
    type: Literal["pix"] = "pix"
    currency: str
    name: str
    key_type: PixKeyType
    key: str


MessageButton = Annotated[
    ButtonReply | ButtonCopy | ButtonUrl | ButtonCall | ButtonPix,
    Field(discriminator="type"),
]


class ButtonsMessageOptions(BaseMessageOptions):
    title: str
    description: str
    buttons: list[MessageButton]
    footer: str | None = None


class StatusMessageOptions(EvolutionModel):
    """Status/story. Para tipos não-texto, `content` é URL ou base64."""

    type: StatusType
    content: str
    caption: str | None = None
    background_color: str | None = None
    font: StatusFont | None = None
    all_contacts: bool | None = None
    status_jid_list: list[str] | None = None


class PtvMessageOptions(BaseMessageOptions):
    """Nota de vídeo (PTV). `video` aceita URL ou base64."""

    video: str
