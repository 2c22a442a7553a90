"""Transport tests (respx mock)."""

import json

import httpx
import pytest
import respx
from feishu_chatbot import ChatBot, HttpxTransport, InMemoryTransport

WEBHOOK = "https://open.feishu.cn/open-apis/bot/v2/hook/test-token"


@respx.mock
async def test_httpx_transport_posts_body() -> None:
    """POSTs the JSON text with the Content-Type header."""
    route = respx.post(WEBHOOK).mock(return_value=httpx.Response(200, json={"StatusCode": 0}))
    transport = HttpxTransport()
    resp = await transport.request(
        WEBHOOK,
        method="POST",
        headers={"Content-Type": "application/json"},
        data='{"content": {}}',
    )
    assert resp.status_code == 200
    assert route.called
    request = route.calls.last.request
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"content": {}}'


@respx.mock
async def test_httpx_transport_http_error() -> None:
    """A 500 response raises httpx.HTTPStatusError."""
    respx.post(WEBHOOK).mock(return_value=httpx.Response(500, text="Internal Server Error"))
    transport = HttpxTransport()
    with pytest.raises(httpx.HTTPStatusError):
        await transport.request(WEBHOOK, method="POST", headers={}, data="{}")


async def test_httpx_transport_network_error() -> None:
    with respx.mock:
        respx.post(WEBHOOK).mock(side_effect=httpx.ConnectError("Connection refused"))
        transport = HttpxTransport()
        with pytest.raises(httpx.ConnectError):
            await transport.request(WEBHOOK, method="POST", headers={}, data="{}")


@respx.mock
async def test_chat_bot_default_transport_end_to_end() -> None:
    route = respx.post(WEBHOOK).mock(return_value=httpx.Response(200, json={"StatusCode": 0}))
    bot = ChatBot.create(WEBHOOK, secret="s")
    resp = await bot.text("hello")
    assert resp.json() == {"StatusCode": 0}
    body = json.loads(route.calls.last.request.content)
    assert body["content"] == {"msg_type": "text", "content": {"text": "hello"}}
    assert isinstance(body["timestamp"], int)
    assert isinstance(body["sign"], str)


@respx.mock
async def test_chat_bot_http_error_propagates() -> None:
    respx.post(WEBHOOK).mock(return_value=httpx.Response(400, text="Bad Request"))
    bot = ChatBot.create(WEBHOOK)
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await bot.interactive({"foo": 1})
    assert exc_info.value.response.status_code == 400


async def test_in_memory_transport_records_requests() -> None:
    transport = InMemoryTransport(response="ok")
    result = await transport.request(
        WEBHOOK, method="POST", headers={"Content-Type": "application/json"}, data='{"a": 1}'
    )
    assert result == "ok"
    assert len(transport.sent) == 1
    assert transport.sent[0].body == {"a": 1}


async def test_in_memory_transport_sent_returns_copy() -> None:
    transport = InMemoryTransport()
    await transport.request(WEBHOOK, method="POST", headers={}, data="{}")
    sent1 = transport.sent
    sent2 = transport.sent
    assert sent1 is not sent2
    assert sent1 == sent2
