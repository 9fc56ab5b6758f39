"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from jjnamer.config import ENV_VARS
from jjnamer.llm.base import BaseLLMProvider, LLMResult
from jjnamer.vcs.base import BaseVcs
from jjnamer.vcs.exceptions import BookmarkExists, PushRejected


class FakeVcs(BaseVcs):
    """In-memory jj double that records every operation."""

    def __init__(
        self,
        log_output: str = "",
        list_error: Exception | None = None,
        existing_bookmarks: tuple[str, ...] = (),
        push_error: str | None = None,
    ):
        self.log_output = log_output
        self.list_error = list_error
        self.bookmarks = set(existing_bookmarks)
        self.push_error = push_error
        self.calls = []

    def list_messages(self, revision: str, template: str) -> str:
        self.calls.append(("list", revision, template))
        if self.list_error is not None:
            raise self.list_error
        return self.log_output

    def create_bookmark(self, name: str) -> str:
        self.calls.append(("create", name))
        if name in self.bookmarks:
            raise BookmarkExists(f"Bookmark '{name}' already exists.")
        self.bookmarks.add(name)
        return f"Created 1 bookmarks pointing to qpvuntsm 1a2b3c4d {name}"

    def push_bookmark(self, name: str, remote: str | None = None, allow_new: bool = False) -> str:
        self.calls.append(("push", name, remote, allow_new))
        if self.push_error is not None:
            raise PushRejected(self.push_error)
        return f"Changes to push to origin:\n  Add bookmark {name} to 1a2b3c4d"

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakeProvider(BaseLLMProvider):
    """Model double returning a canned completion."""

    def __init__(self, text: str = "fix-login-retry", error: Exception | None = None):
        self.model = "fake-model"
        self.text = text
        self.error = error
        self.prompts = []

    def generate(self, prompt: str) -> LLMResult:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResult(text=self.text, model=self.model, input_tokens=42, output_tokens=5)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, mocker, monkeypatch):
    """Keep tests away from the real ~/.jjnamer, environment and .env files."""
    config_dir = tmp_path / ".jjnamer"
    mocker.patch("jjnamer.global_config._CONFIG_DIR", config_dir)
    mocker.patch("jjnamer.config.load_dotenv")
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    return config_dir


@pytest.fixture
def sample_log_output():
    """jj log output for two described commits and an empty working copy."""
    return "fix login bug\nadd retry logic\n\n"


@pytest.fixture
def make_vcs():
    """Factory for FakeVcs instances."""
    return FakeVcs


@pytest.fixture
def make_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def mock_jj_commands(mocker):
    """Mock subprocess.run for jj commands."""
    return mocker.patch("subprocess.run")
