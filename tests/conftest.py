import pytest

from app import create_app
from utils.config import Config
from utils.gemini_client import UpstreamError


class StubClient:
    """Stands in for GeminiClient and records every prompt it is sent."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    @property
    def called(self):
        return bool(self.prompts)

    def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def config():
    return Config(google_api_key="test-key")


@pytest.fixture
def stub_client():
    return StubClient()


@pytest.fixture
def client(config, stub_client):
    app = create_app(config, client=stub_client)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def upstream_error():
    return UpstreamError("403 API key not valid: secret-detail")
