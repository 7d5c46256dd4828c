from __future__ import annotations

from types import SimpleNamespace

import pytest

from color_translator.core.config import AppSettings
from color_translator.integrations import build_translation_client
from color_translator.integrations.base import TranslationProviderError
from color_translator.integrations.google import GoogleTranslateClient
from color_translator.integrations.llm import LLMTranslationClient


class StubGoogleTranslator:
    instances: list[StubGoogleTranslator] = []

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        self.texts: list[str] = []
        StubGoogleTranslator.instances.append(self)

    def translate(self, text: str) -> str:
        self.texts.append(text)
        return f"[{self.target}] {text}"


class BrokenGoogleTranslator:
    def __init__(self, source: str, target: str) -> None:
        raise ValueError(f"{target} is not supported")


class SilentGoogleTranslator:
    def __init__(self, source: str, target: str) -> None:
        pass

    def translate(self, text: str) -> None:
        return None


class StubCompletions:
    def __init__(self, content: str | None) -> None:
        self._content = content
        self.requests: list[dict[str, object]] = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        message = SimpleNamespace(content=self._content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _stub_openai(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=StubCompletions(content)))


def test_build_translation_client_defaults_to_google() -> None:
    client = build_translation_client(AppSettings(TRANSLATION_PROVIDER="google"))

    assert isinstance(client, GoogleTranslateClient)


def test_build_translation_client_selects_openai() -> None:
    client = build_translation_client(AppSettings(TRANSLATION_PROVIDER="OpenAI"))

    assert isinstance(client, LLMTranslationClient)


def test_build_translation_client_rejects_unknown_provider() -> None:
    with pytest.raises(ValueError, match="deepl"):
        build_translation_client(AppSettings(TRANSLATION_PROVIDER="deepl"))


@pytest.mark.asyncio
async def test_google_client_translates_with_auto_source() -> None:
    StubGoogleTranslator.instances.clear()
    client = GoogleTranslateClient(translator_factory=StubGoogleTranslator)

    translated = await client.translate("red, green", source_locale="auto", target_locale="es")

    assert translated == "[es] red, green"
    translator = StubGoogleTranslator.instances[-1]
    assert translator.source == "auto"
    assert translator.texts == ["red, green"]


@pytest.mark.asyncio
async def test_google_client_normalizes_chinese_locale() -> None:
    StubGoogleTranslator.instances.clear()
    client = GoogleTranslateClient(translator_factory=StubGoogleTranslator)

    await client.translate("red", source_locale="", target_locale="zh")

    translator = StubGoogleTranslator.instances[-1]
    assert translator.source == "auto"
    assert translator.target == "zh-CN"


@pytest.mark.asyncio
async def test_google_client_wraps_sdk_errors() -> None:
    client = GoogleTranslateClient(translator_factory=BrokenGoogleTranslator)

    with pytest.raises(TranslationProviderError, match="not supported"):
        await client.translate("red", target_locale="xx")


@pytest.mark.asyncio
async def test_google_client_rejects_empty_result() -> None:
    client = GoogleTranslateClient(translator_factory=SilentGoogleTranslator)

    with pytest.raises(TranslationProviderError):
        await client.translate("red", target_locale="es")


@pytest.mark.asyncio
async def test_llm_client_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    client = LLMTranslationClient(AppSettings())

    assert not client.is_configured
    with pytest.raises(TranslationProviderError):
        await client.translate("red", target_locale="es")


@pytest.mark.asyncio
async def test_llm_client_returns_stripped_completion() -> None:
    client = LLMTranslationClient(AppSettings(OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-test"))
    stub = _stub_openai("  rojo, verde \n")
    client._openai_client = stub

    translated = await client.translate("red, green", source_locale="auto", target_locale="es")

    assert translated == "rojo, verde"
    request = stub.chat.completions.requests[0]
    assert request["model"] == "gpt-test"
    assert request["messages"][-1] == {"role": "user", "content": "red, green"}
    assert "', '" in request["messages"][0]["content"]


@pytest.mark.asyncio
async def test_llm_client_rejects_empty_completion() -> None:
    client = LLMTranslationClient(AppSettings(OPENAI_API_KEY="sk-test"))
    client._openai_client = _stub_openai("")

    with pytest.raises(TranslationProviderError):
        await client.translate("red", target_locale="es")
