import io
import json
import os

# The engine is bound when main is imported, so these must be set first.
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['SECRET_KEY'] = 'test-secret'
os.environ['AI_PROVIDER'] = 'gateway'
os.environ['AI_GATEWAY_API_KEY'] = 'test-key'

import pytest
import requests
from PIL import Image

import main
from models import db


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    @property
    def text(self):
        return json.dumps(self.payload)

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON body")
        return self.payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeGateway:
    """Stands in for requests.post against the AI gateway and records each call."""

    def __init__(self):
        self.calls = []
        self.response = self.completion("")

    @staticmethod
    def completion(content):
        return FakeResponse({"choices": [{"message": {"content": content}}]})

    def reply(self, content):
        if not isinstance(content, str):
            content = json.dumps(content)
        self.response = self.completion(content)

    def fail(self, status_code):
        self.response = FakeResponse({"error": "upstream"}, status_code)

    def post(self, url, **kwargs):
        self.calls.append({'url': url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last_payload(self):
        return self.calls[-1]['json']

    @property
    def last_user_text(self):
        content = self.last_payload['messages'][-1]['content']
        if isinstance(content, str):
            return content
        return " ".join(part.get('text', '') for part in content)


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    def refuse(*args, **kwargs):
        raise AssertionError("Unexpected outbound HTTP call in tests")

    monkeypatch.setattr(requests, 'post', refuse)
    monkeypatch.setattr(requests, 'get', refuse)


@pytest.fixture
def app():
    main.app.config.update(TESTING=True)
    with main.app.app_context():
        db.create_all()
        yield main.app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_gateway(monkeypatch):
    fake = FakeGateway()
    monkeypatch.setattr(requests, 'post', fake.post)
    return fake


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new('RGB', (8, 8), color=(34, 139, 34)).save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def seeded(app):
    main.seed_database()
    return app
