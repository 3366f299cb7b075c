"""Testes para a fachada EvolutionClient."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from evolution_sdk import EvolutionClient, EvolutionConfigurationError, EvolutionSettings
from evolution_sdk.connectors.http_base import OutgoingRequest
from tests.fakes.fake_evolution_api import (
    DEFAULT_API_KEY,
    DEFAULT_BASE_URL,
    DEFAULT_INSTANCE,
    FakeEvolutionApi,
)


async def _drain_event_loop() -> None:
    """Deixa rodar tarefas agendadas (ex.: fechamento de clientes substituídos)."""
    for _ in range(5):
        await asyncio.sleep(0)


class TestConstruction:
    """Montagem do cliente a partir de settings e overrides."""

    def test_overrides_win_over_settings(self, fake_api: FakeEvolutionApi) -> None:
        base = EvolutionSettings(base_url="https://a", api_key="k", instance_name="x")
        client = EvolutionClient(base, api_key="k2", transport=fake_api.transport)
        assert client.config.base_url == "https://a"
        assert client.config.api_key == "k2"
        assert client.default_instance == "x"

    def test_exposes_all_controllers(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        for name in ("instance", "chat", "group", "profile", "settings", "message", "label", "websocket"):
            assert getattr(client, name) is not None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, fake_api: FakeEvolutionApi) -> None:
        monkeypatch.setenv("EVOLUTION_HOST", "https://env.example.com")
        monkeypatch.setenv("EVOLUTION_API_KEY", "env-key")
        monkeypatch.setenv("EVOLUTION_INSTANCE", "env-inst")

        client = EvolutionClient.from_env(transport=fake_api.transport)

        assert client.config.base_url == "https://env.example.com"
        assert client.config.api_key == "env-key"
        assert client.default_instance == "env-inst"

    @pytest.mark.asyncio
    async def test_custom_request_hooks(self, fake_api: FakeEvolutionApi) -> None:
        seen: list[str] = []

        def record_hook(request: OutgoingRequest) -> OutgoingRequest:
            seen.append(request.path)
            return request

        client = fake_api.make_client(request_hooks=[record_hook])
        await client.instance.fetch_all()

        assert seen == ["/instance/fetchInstances"]


class TestDefaultInstance:
    """Troca da instância padrão em tempo de execução."""

    @pytest.mark.asyncio
    async def test_set_default_instance_applies_to_next_calls(
        self, fake_api: FakeEvolutionApi
    ) -> None:
        client = fake_api.make_client()
        controller = client.message

        await controller.send_text({"number": "5511", "text": "1"})
        client.set_default_instance("nova")
        await controller.send_text({"number": "5511", "text": "2"})

        paths = [request.url.path for request in fake_api.requests]
        assert paths == [f"/message/sendText/{DEFAULT_INSTANCE}", "/message/sendText/nova"]
        assert client.default_instance == "nova"

    @pytest.mark.asyncio
    async def test_clearing_default_falls_back_to_settings(
        self, fake_api: FakeEvolutionApi
    ) -> None:
        client = fake_api.make_client()
        client.set_default_instance("nova")
        client.set_default_instance(None)

        await client.instance.connect()

        assert fake_api.last_request.url.path == f"/instance/connect/{DEFAULT_INSTANCE}"

    @pytest.mark.asyncio
    async def test_set_default_instance_without_settings_instance(
        self, fake_api: FakeEvolutionApi
    ) -> None:
        client = fake_api.make_client(instance_name=None)
        with pytest.raises(EvolutionConfigurationError):
            await client.instance.connect()

        client.set_default_instance("tardia")
        await client.instance.connect()

        assert fake_api.last_request.url.path == "/instance/connect/tardia"


class TestRebinding:
    """Troca de API key e base URL."""

    @pytest.mark.asyncio
    async def test_set_api_key_affects_later_requests(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        await client.instance.fetch_all()
        old_http = client.http

        client.set_api_key("nova-chave")
        await client.instance.fetch_all()

        assert fake_api.requests[0].headers["apikey"] == DEFAULT_API_KEY
        assert fake_api.requests[1].headers["apikey"] == "nova-chave"
        assert client.http is not old_http

    @pytest.mark.asyncio
    async def test_set_api_key_overrides_apikey_header(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client(headers={"apikey": "antiga", "X-Trace": "1"})

        client.set_api_key("nova")
        await client.instance.connection_state()

        sent = fake_api.last_request
        assert sent.headers.get_list("apikey") == ["nova"]
        assert sent.headers["X-Trace"] == "1"
        assert "apikey" not in client.config.headers

    @pytest.mark.asyncio
    async def test_set_base_url(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()

        client.set_base_url("https://outro.test")
        await client.instance.fetch_all()

        assert fake_api.last_request.url.host == "outro.test"

    @pytest.mark.asyncio
    async def test_rebinding_keeps_dynamic_default_instance(
        self, fake_api: FakeEvolutionApi
    ) -> None:
        client = fake_api.make_client()
        client.set_default_instance("dinamica")

        client.set_api_key("nova-chave")
        await client.instance.connect()

        assert fake_api.last_request.url.path == "/instance/connect/dinamica"

    @pytest.mark.asyncio
    async def test_idle_retired_client_is_closed(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        for index in range(5):
            client.set_api_key(f"chave-{index}")
            await _drain_event_loop()

        assert len(client._retired) <= 1
        assert all(http.is_closed for http in client._retired)
        assert client.http.is_closed is False

    @pytest.mark.asyncio
    async def test_in_flight_request_finishes_before_close(self) -> None:
        entered = asyncio.Event()
        release = asyncio.Event()
        seen_keys: list[str] = []

        async def slow_handler(request: httpx.Request) -> httpx.Response:
            seen_keys.append(request.headers["apikey"])
            entered.set()
            await release.wait()
            return httpx.Response(200, json={"state": "open"})

        client = EvolutionClient(
            base_url=DEFAULT_BASE_URL,
            api_key="antiga",
            instance_name=DEFAULT_INSTANCE,
            transport=httpx.MockTransport(slow_handler),
        )
        old_http = client.http
        pending = asyncio.create_task(client.instance.connection_state())
        await entered.wait()

        client.set_api_key("nova")
        await _drain_event_loop()
        assert old_http.is_closed is False
        assert old_http.in_flight == 1

        release.set()
        assert await pending == {"state": "open"}
        assert old_http.is_closed is True
        assert seen_keys == ["antiga"]
        await client.aclose()

    @pytest.mark.asyncio
    async def test_stale_controller_rejects_new_requests(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        stale = client.instance

        client.set_api_key("nova")

        with pytest.raises(EvolutionConfigurationError, match="substituído"):
            await stale.fetch_all()
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_aclose_closes_retired_clients(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        old_http = client.http
        client.set_api_key("nova-chave")

        await client.aclose()

        assert old_http.is_closed is True
        assert client.http.is_closed is True


class TestWithSettings:
    """Clonagem com configuração alterada."""

    @pytest.mark.asyncio
    async def test_clone_is_independent(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        clone = client.with_settings(api_key="clone-key")

        await clone.instance.fetch_all()
        await client.instance.fetch_all()

        assert fake_api.requests[0].headers["apikey"] == "clone-key"
        assert fake_api.requests[1].headers["apikey"] == DEFAULT_API_KEY
        assert clone.config.base_url == DEFAULT_BASE_URL

    def test_clone_inherits_dynamic_instance(self, fake_api: FakeEvolutionApi) -> None:
        client = fake_api.make_client()
        client.set_default_instance("dinamica")

        assert client.with_settings(api_key="x").default_instance == "dinamica"
        assert client.with_settings(instance_name="fixa").default_instance == "fixa"

    @pytest.mark.asyncio
    async def test_async_context_manager(self, fake_api: FakeEvolutionApi) -> None:
        async with fake_api.make_client() as client:
            await client.instance.fetch_all()
        assert client.http.is_closed is True
