"""Testes para GroupController e ProfileController."""

from __future__ import annotations

import pytest

from evolution_sdk.models import PrivacySettings
from tests.fakes.fake_evolution_api import DEFAULT_INSTANCE, FakeEvolutionApi

GROUP_JID = "120363025246125486@g.us"


class TestGroupController:
    """O JID do grupo vai na query string."""

    @pytest.mark.asyncio
    async def test_fetch_all_participants_flag(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.group.fetch_all(get_participants=True)

        sent = fake_api.last_request
        assert sent.url.path == f"/group/fetchAllGroups/{DEFAULT_INSTANCE}"
        assert sent.url.params["getParticipants"] == "true"

    @pytest.mark.asyncio
    async def test_find_by_id(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.group.find_by_id(GROUP_JID)

        sent = fake_api.last_request
        assert sent.url.path == f"/group/findGroupInfos/{DEFAULT_INSTANCE}"
        assert sent.url.params["groupJid"] == GROUP_JID

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("find_participants", "/group/participants/{}"),
            ("fetch_invite_code", "/group/inviteCode/{}"),
        ],
    )
    async def test_group_jid_as_query(
        self, fake_api: FakeEvolutionApi, method: str, path: str
    ) -> None:
        client = fake_api.make_client()

        await getattr(client.group, method)(GROUP_JID, instance_name="loja")

        sent = fake_api.last_request
        assert sent.method == "GET"
        assert sent.url.path == path.format("loja")
        assert dict(sent.url.params) == {"groupJid": GROUP_JID}

    @pytest.mark.asyncio
    async def test_update_participant(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.group.update_participant(GROUP_JID, "promote", ["5511@s.whatsapp.net"])

        sent = fake_api.last_request
        assert sent.method == "PUT"
        assert sent.url.path == f"/group/updateParticipant/{DEFAULT_INSTANCE}"
        assert sent.url.params["groupJid"] == GROUP_JID
        assert fake_api.last_json() == {
            "action": "promote",
            "participants": ["5511@s.whatsapp.net"],
        }


class TestProfileController:
    """Perfil da instância e privacidade."""

    @pytest.mark.asyncio
    async def test_fetch_profile(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.profile.fetch_profile("5511")

        assert fake_api.last_request.url.path == f"/chat/fetchProfile/{DEFAULT_INSTANCE}"
        assert fake_api.last_json() == {"number": "5511"}

    @pytest.mark.asyncio
    async def test_update_picture_strips_data_uri(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.profile.update_picture("data:image/jpeg;base64,/9j/4AAQSkZJRgABAQAAAQABAAD")

        assert fake_api.last_json() == {"picture": "/9j/4AAQSkZJRgABAQAAAQABAAD"}

    @pytest.mark.asyncio
    async def test_remove_picture(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.profile.remove_picture()

        assert fake_api.last_request.method == "DELETE"
        assert fake_api.last_request.url.path == f"/chat/removeProfilePicture/{DEFAULT_INSTANCE}"

    @pytest.mark.asyncio
    async def test_update_name_and_status(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.profile.update_name("Loja")
        assert fake_api.last_json() == {"name": "Loja"}

        await client.profile.update_status("Aberto")
        assert fake_api.last_request.url.path == f"/chat/updateProfileStatus/{DEFAULT_INSTANCE}"
        assert fake_api.last_json() == {"status": "Aberto"}

    @pytest.mark.asyncio
    async def test_privacy(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        await client.profile.get_privacy()
        assert fake_api.last_request.url.path == f"/chat/fetchPrivacySettings/{DEFAULT_INSTANCE}"

        await client.profile.update_privacy(PrivacySettings(readreceipts="none", last="contacts"))
        assert fake_api.last_request.method == "PUT"
        assert fake_api.last_json() == {
            "privacySettings": {"readreceipts": "none", "last": "contacts"}
        }
