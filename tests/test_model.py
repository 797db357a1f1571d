import json
import sys

import pytest
import responses

from llmterm.model import Model, ModelError
from llmterm.shell import Shell

OLLAMA_URL = "http://localhost:11434/v1/chat/completions"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def _reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_json_forms():
    assert Model.gpt4o().to_json() == "gpt-4o"
    assert Model.gpt4o_mini().to_json() == "gpt-4o-mini"
    assert Model.ollama("llama3.1").to_json() == {"ollama": "llama3.1"}


@pytest.mark.parametrize(
    "model", [Model.gpt4o(), Model.gpt4o_mini(), Model.ollama("llama3.1")]
)
def test_json_round_trip(model):
    assert Model.from_json(json.loads(json.dumps(model.to_json()))) == model


@pytest.mark.parametrize("value", ["gpt-5", {"other": "x"}, {"ollama": 3}, 7, None])
def test_from_json_rejects(value):
    with pytest.raises(ValueError):
        Model.from_json(value)


def test_hosted_name_is_checked():
    with pytest.raises(ValueError):
        Model("not-a-model")


def test_endpoints():
    assert Model.gpt4o().endpoint() == "https://api.openai.com/v1/"
    assert Model.ollama("llama3.1").endpoint() == "http://localhost:11434/v1/"


def test_api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
    assert Model.gpt4o().api_key() == "placeholder"
    assert Model.ollama("llama3.1").api_key() == "ollama"


def test_api_key_missing(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ModelError):
        Model.gpt4o_mini().api_key()


def test_system_prompt_names_shell_and_os(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    text = Model.gpt4o().system_prompt(Shell.ZSH)
    assert "Z Shell (zsh) compatible" in text
    assert "running on the linux operating system" in text


def test_get_command_ollama(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("SHELL", "/bin/bash")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, OLLAMA_URL, json=_reply("ls -la"))
        result = Model.ollama("llama3.1").get_command("list files", 256)
        sent = json.loads(rsps.calls[0].request.body)
        auth = rsps.calls[0].request.headers["Authorization"]
    assert result == "ls -la"
    assert sent["model"] == "llama3.1"
    assert sent["max_tokens"] == 256
    assert sent["temperature"] == 0.5
    assert sent["messages"][1] == {"role": "user", "content": "list files"}
    assert sent["messages"][0]["role"] == "system"
    assert "Bourne Again Shell (bash / sh)" in sent["messages"][0]["content"]
    assert auth == "Bearer ollama"


def test_get_command_openai_sends_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, OPENAI_URL, json=_reply("pwd"))
        result = Model.gpt4o().get_command("where am I", 100)
        auth = rsps.calls[0].request.headers["Authorization"]
    assert result == "pwd"
    assert auth == "Bearer placeholder"


def test_get_command_no_choices():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, OLLAMA_URL, json={"choices": []})
        assert Model.ollama("llama3.1").get_command("x", 10) is None


def test_get_command_http_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, OLLAMA_URL, status=500, json={"error": "boom"})
        with pytest.raises(ModelError):
            Model.ollama("llama3.1").get_command("x", 10)


def test_get_command_bad_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, OLLAMA_URL, body="not json")
        with pytest.raises(ModelError):
            Model.ollama("llama3.1").get_command("x", 10)