import pytest
import requests

import gateway
from gateway import ConfigurationError, GatewayError, NoJsonFound, chat_completion, extract_json


def test_extract_json_finds_object_inside_prose():
    content = 'Here is your plan:\n{"pestRisk": "High", "recommendations": ["Spray neem"]}\nGood luck!'
    assert extract_json(content) == {"pestRisk": "High", "recommendations": ["Spray neem"]}


def test_extract_json_without_braces_raises_no_json_found():
    with pytest.raises(NoJsonFound):
        extract_json("Water early in the morning.")


def test_extract_json_malformed_object_is_a_value_error():
    with pytest.raises(ValueError) as exc:
        extract_json('{"summary": "Sunny", }')
    assert not isinstance(exc.value, NoJsonFound)


def test_fenced_block_wins_when_allowed():
    content = 'Notes {not json}\n```json\n{"summary": "Light rain"}\n```'
    assert extract_json(content, allow_fence=True) == {"summary": "Light rain"}


def test_fence_mode_falls_back_to_whole_reply():
    with pytest.raises(ValueError):
        extract_json("just words", allow_fence=True)


def test_extract_json_rejects_non_objects():
    with pytest.raises(ValueError):
        extract_json("[1, 2, 3]", allow_fence=True)


@pytest.mark.parametrize("status_code, message, status", [
    (429, gateway.RATE_LIMITED_MESSAGE, 429),
    (402, gateway.UNAVAILABLE_MESSAGE, 402),
    (500, gateway.FAILED_MESSAGE, 500),
    (503, gateway.FAILED_MESSAGE, 500),
])
def test_error_for_status(status_code, message, status):
    error = gateway.error_for_status(status_code)
    assert error.message == message
    assert error.status == status


def test_chat_completion_posts_openai_style_payload(app, fake_gateway):
    fake_gateway.reply("Irrigate tomorrow.")

    content = chat_completion([{"role": "user", "content": "Hello"}], temperature=0.7)

    assert content == "Irrigate tomorrow."
    call = fake_gateway.calls[0]
    assert call['url'] == app.config['AI_GATEWAY_URL']
    assert call['headers']['Authorization'] == "Bearer test-key"
    assert call['json']['model'] == app.config['AI_GATEWAY_MODEL']
    assert call['json']['temperature'] == 0.7
    assert 'max_tokens' not in call['json']
    assert call['timeout'] == app.config['AI_REQUEST_TIMEOUT']


def test_chat_completion_uses_requested_model(app, fake_gateway):
    chat_completion([{"role": "user", "content": "Hi"}], model="google/gemini-2.5-flash", max_tokens=2000)
    assert fake_gateway.last_payload['model'] == "google/gemini-2.5-flash"
    assert fake_gateway.last_payload['max_tokens'] == 2000


@pytest.mark.parametrize("status_code, status", [(429, 429), (402, 402), (500, 500), (400, 500)])
def test_chat_completion_maps_upstream_status(app, fake_gateway, status_code, status):
    fake_gateway.fail(status_code)
    with pytest.raises(GatewayError) as exc:
        chat_completion([{"role": "user", "content": "Hi"}])
    assert exc.value.status == status


def test_chat_completion_wraps_network_errors(app, fake_gateway):
    fake_gateway.response = requests.exceptions.ConnectionError("connection refused")
    with pytest.raises(GatewayError) as exc:
        chat_completion([{"role": "user", "content": "Hi"}])
    assert exc.value.status == 500
    assert exc.value.message == gateway.FAILED_MESSAGE


def test_missing_api_key_is_a_configuration_error(app, fake_gateway, monkeypatch):
    monkeypatch.setitem(app.config, 'AI_GATEWAY_API_KEY', None)
    with pytest.raises(ConfigurationError) as exc:
        chat_completion([{"role": "user", "content": "Hi"}])
    assert exc.value.status == 500
    assert fake_gateway.calls == []


def test_empty_choices_return_empty_string(app, fake_gateway):
    from conftest import FakeResponse
    fake_gateway.response = FakeResponse({"choices": []})
    assert chat_completion([{"role": "user", "content": "Hi"}]) == ""


def test_image_message_carries_data_url():
    message = gateway.image_message("Look at this", "data:image/png;base64,AAAA")
    assert message['role'] == 'user'
    assert message['content'][1]['image_url']['url'] == "data:image/png;base64,AAAA"


def test_gemini_parts_split_inline_images():
    parts = gateway._gemini_parts([
        {'type': 'text', 'text': 'Identify'},
        {'type': 'image_url', 'image_url': {'url': 'data:image/jpeg;base64,QUJD'}},
    ])
    assert parts[0] == 'Identify'
    assert parts[1] == {'inline_data': {'data': 'QUJD', 'mime_type': 'image/jpeg'}}


def test_gemini_parts_reject_remote_urls():
    with pytest.raises(GatewayError) as exc:
        gateway._gemini_parts([{'type': 'image_url', 'image_url': {'url': 'https://example.com/leaf.jpg'}}])
    assert exc.value.status == 400


class FakeGenerativeModel:
    error = None
    created = []

    def __init__(self, model_name, system_instruction=None):
        self.model_name = model_name
        self.system_instruction = system_instruction
        FakeGenerativeModel.created.append(self)

    def generate_content(self, contents):
        if self.error:
            raise self.error
        self.contents = contents
        return type('Reply', (), {'text': '{"summary": "ok"}'})()


@pytest.fixture
def gemini(app, monkeypatch):
    monkeypatch.setitem(app.config, 'AI_PROVIDER', 'gemini')
    monkeypatch.setitem(app.config, 'GOOGLE_API_KEY', 'g-key')
    monkeypatch.setattr(gateway.genai, 'configure', lambda api_key: None)
    monkeypatch.setattr(gateway.genai, 'GenerativeModel', FakeGenerativeModel)
    FakeGenerativeModel.error = None
    FakeGenerativeModel.created = []
    return FakeGenerativeModel


def test_gemini_provider_uses_configured_model_and_system_prompt(gemini, app):
    content = chat_completion([
        {"role": "system", "content": "You are a farm advisor."},
        {"role": "user", "content": "Advise me."},
    ], model="google/gemini-3-flash-preview")

    assert content == '{"summary": "ok"}'
    model = gemini.created[0]
    assert model.model_name == app.config['GEMINI_MODEL']
    assert model.system_instruction == "You are a farm advisor."
    assert model.contents == ["Advise me."]


def test_gemini_quota_maps_to_rate_limit(gemini):
    gemini.error = gateway.google_exceptions.ResourceExhausted("quota exceeded")
    with pytest.raises(GatewayError) as exc:
        chat_completion([{"role": "user", "content": "Hi"}])
    assert exc.value.status == 429
    assert exc.value.message == gateway.RATE_LIMITED_MESSAGE
