"""Controller de envio de mensagens (`/message/*`).

Campos de mídia (media, audio, sticker, video, content de status não-texto)
seguem intactos quando são URL; caso contrário o prefixo
`data:<mime>;base64,` é removido antes do envio.

Exemplo:
    await client.message.send_text({"number": "5511999999999", "text": "Olá!"})
    await client.message.send_text(options, instance_name="outra-instancia")
"""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.base import Payload, dump_payload
from evolution_sdk.utils.media import prepare_media


class MessageController(BaseController):
    async def _send(
        self,
        action: str,
        options: Payload,
        instance_name: str | None,
        media_field: str | None = None,
    ) -> dict[str, Any]:
        body = dump_payload(options)
        if media_field and isinstance(body.get(media_field), str):
            body[media_field] = prepare_media(body[media_field])
        return await self._instance_request(
            "POST", f"/message/{action}/:instance", instance_name, json=body
        )

    async def send_text(self, options: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._send("sendText", options, instance_name)

    async def send_media(self, options: Payload, instance_name: str | None = None) -> dict[str, Any]:
        """Imagem, vídeo ou documento (MediaMessageOptions)."""
        return await self._send("sendMedia", options, instance_name, media_field="media")

    async def send_whatsapp_audio(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Nota de voz (AudioMessageOptions)."""
        return await self._send("sendWhatsAppAudio", options, instance_name, media_field="audio")

    async def send_sticker(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._send("sendSticker", options, instance_name, media_field="sticker")

    async def send_location(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._send("sendLocation", options, instance_name)

    async def send_contact(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._send("sendContact", options, instance_name)

    async def send_reaction(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._send("sendReaction", options, instance_name)

    async def send_poll(self, options: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._send("sendPoll", options, instance_name)

    async def send_list(self, options: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._send("sendList", options, instance_name)

    async def send_buttons(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._send("sendButtons", options, instance_name)

    async def send_status(
        self,
        options: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Status/story. Só tipos não-texto têm `content` tratado como mídia."""
        body = dump_payload(options)
        media_field = None if body.get("type") == "text" else "content"
        return await self._send("sendStatus", body, instance_name, media_field=media_field)

    async def send_ptv(self, options: Payload, instance_name: str | None = None) -> dict[str, Any]:
        """Nota de vídeo (PtvMessageOptions)."""
        return await self._send("sendPtv", options, instance_name, media_field="video")
