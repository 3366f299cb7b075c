"""Testes para InstanceController e ChatController."""

from __future__ import annotations

import pytest

from evolution_sdk.models import CreateInstanceOptions
from tests.fakes.fake_evolution_api import DEFAULT_INSTANCE, FakeEvolutionApi


class TestInstanceController:
    """Ciclo de vida de instâncias."""

    @pytest.mark.asyncio
    async def test_fetch_all_has_no_instance_in_path(self, fake_api: FakeEvolutionApi) -> None:
        fake_api.respond(200, [{"name": "a"}, {"name": "b"}])
        client = fake_api.make_client(instance_name=None)

        result = await client.instance.fetch_all()

        assert result == [{"name": "a"}, {"name": "b"}]
        assert fake_api.last_request.method == "GET"
        assert fake_api.last_request.url.path == "/instance/fetchInstances"

    @pytest.mark.asyncio
    async def test_create_uses_camel_case(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.instance.create(CreateInstanceOptions(instance_name="loja", qrcode=True))

        assert fake_api.last_request.url.path == "/instance/create"
        assert fake_api.last_json() == {
            "instanceName": "loja",
            "qrcode": True,
            "integration": "WHATSAPP-BAILEYS",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "http_method", "path"),
        [
            ("connect", "GET", "/instance/connect/{}"),
            ("connection_state", "GET", "/instance/connectionState/{}"),
            ("restart", "PUT", "/instance/restart/{}"),
            ("logout", "GET", "/instance/logout/{}"),
            ("delete", "DELETE", "/instance/delete/{}"),
        ],
    )
    async def test_lifecycle_endpoints(
        self,
        fake_api: FakeEvolutionApi,
        method: str,
        http_method: str,
        path: str,
    ) -> None:
        client = fake_api.make_client()

        await getattr(client.instance, method)()

        assert fake_api.last_request.method == http_method
        assert fake_api.last_request.url.path == path.format(DEFAULT_INSTANCE)

    @pytest.mark.asyncio
    async def test_set_presence(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.instance.set_presence("available", instance_name="outra")

        assert fake_api.last_request.url.path == "/instance/setPresence/outra"
        assert fake_api.last_json() == {"presence": "available"}

    @pytest.mark.asyncio
    async def test_empty_response_body_returns_none(self, fake_api: FakeEvolutionApi) -> None:
        fake_api.respond(200)
        client = fake_api.make_client()

        assert await client.instance.logout() is None

    @pytest.mark.asyncio
    async def test_plain_text_response(self, fake_api: FakeEvolutionApi) -> None:
        fake_api.respond(200, content=b"ok")
        client = fake_api.make_client()

        assert await client.instance.restart() == "ok"

    @pytest.mark.asyncio
    async def test_non_utf8_body_falls_back_to_text(self, fake_api: FakeEvolutionApi) -> None:
        fake_api.respond(200, content=b"\xff\xfe\x00binary")
        client = fake_api.make_client()

        result = await client.instance.connection_state()

        assert isinstance(result, str)
        assert "binary" in result


class TestChatController:
    """Busca de chats, contatos e mensagens."""

    @pytest.mark.asyncio
    async def test_find_chats_without_filter(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.chat.find_chats()

        assert fake_api.last_request.method == "POST"
        assert fake_api.last_request.url.path == f"/chat/findChats/{DEFAULT_INSTANCE}"
        assert fake_api.last_json() == {}

    @pytest.mark.asyncio
    async def test_find_contacts_with_filter(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.chat.find_contacts({"id": "5511@s.whatsapp.net"})

        assert fake_api.last_json() == {"where": {"id": "5511@s.whatsapp.net"}}

    @pytest.mark.asyncio
    async def test_has_whatsapp(self, fake_api: FakeEvolutionApi) -> None:
        fake_api.respond(200, [{"exists": True, "number": "5511"}])
        client = fake_api.make_client()

        result = await client.chat.has_whatsapp(("5511", "5522"))

        assert result[0]["exists"] is True
        assert fake_api.last_request.url.path == f"/chat/whatsappNumbers/{DEFAULT_INSTANCE}"
        assert fake_api.last_json() == {"numbers": ["5511", "5522"]}

    @pytest.mark.asyncio
    async def test_find_messages_pagination(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.chat.find_messages({"key": {"remoteJid": "5511"}}, page=2, offset=50)

        assert fake_api.last_json() == {
            "where": {"key": {"remoteJid": "5511"}},
            "page": 2,
            "offset": 50,
        }

    @pytest.mark.asyncio
    async def test_fetch_profile_picture_url(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.chat.fetch_profile_picture_url("5511")

        assert fake_api.last_request.url.path == f"/chat/fetchProfilePictureUrl/{DEFAULT_INSTANCE}"
        assert fake_api.last_json() == {"number": "5511"}
