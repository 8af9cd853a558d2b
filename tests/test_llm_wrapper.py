from types import SimpleNamespace

import pytest
from openai import OpenAIError
from pydantic import ValidationError

from agent_prompts import AGENT_PROMPTS, HERBALIST
from herb_graph import ALL_TRADITIONS
from llm_wrapper import (
    NO_KEY_DATES,
    NO_RESTRICTIONS,
    OpenAIGenerator,
    ProviderError,
    build_substitutions,
    get_agent_responses,
    run_agents,
    to_text,
)
from pydantic_models import AgentRequest
from tests.fakes import FakeGenerator


def _stub_client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_to_text_flattens_content():
    assert to_text(None) == ""
    assert to_text("plain") == "plain"
    assert to_text(["a", {"type": "text", "text": "b"}, {"type": "image"}]) == "a\nb\n"
    assert to_text([SimpleNamespace(text="part")]) == "part"


def test_agent_request_defaults(intake):
    intake.pop("restrictions")
    intake["traditions"] = []
    req = AgentRequest.model_validate(intake)
    assert req.traditions == list(ALL_TRADITIONS)
    assert req.highlight_count == 4
    assert req.restrictions is None


@pytest.mark.parametrize("field,value", [
    ("highlight_count", 7),
    ("target_platforms", []),
    ("target_platforms", ["MySpace"]),
    ("traditions", ["Druidic"]),
    ("symptoms", ""),
])
def test_agent_request_rejects_bad_input(intake, field, value):
    intake[field] = value
    with pytest.raises(ValidationError):
        AgentRequest.model_validate(intake)


def test_build_substitutions_fills_defaults(intake):
    intake["restrictions"] = None
    req = AgentRequest.model_validate(intake)
    subs = build_substitutions(req, "herb context here")
    assert subs["restrictions"] == NO_RESTRICTIONS
    assert subs["key_dates"] == NO_KEY_DATES
    assert subs["target_platforms"] == "Instagram, TikTok"
    assert subs["herb_context"] == "herb context here"
    assert subs["highlight_count"] == 4


def test_every_prompt_renders_from_substitutions(intake):
    subs = build_substitutions(AgentRequest.model_validate(intake), "ctx {not a field}")
    for prompt in AGENT_PROMPTS:
        system_msg, user_msg = prompt.render(subs)
        assert "{" not in system_msg
        assert "ctx {not a field}" in user_msg


def test_run_agents_fans_out_with_shared_map():
    generator = FakeGenerator()
    subs = {"herb_context": "ctx"}
    texts = run_agents(generator, subs)
    assert texts == {p.name: f"{p.name} says hello" for p in AGENT_PROMPTS}
    assert sorted(name for name, _ in generator.calls) == sorted(p.name for p in AGENT_PROMPTS)
    assert all(called == subs for _, called in generator.calls)


def test_run_agents_propagates_provider_failure():
    with pytest.raises(ProviderError, match="educator"):
        run_agents(FakeGenerator(fail_on="educator"), {})


def test_get_agent_responses(intake):
    generator = FakeGenerator()
    result = get_agent_responses(AgentRequest.model_validate(intake), generator)
    assert result.herbalist == "herbalist says hello"
    assert result.community == "community says hello"
    ids = [m.id for m in result.herb_matches]
    assert "ashwagandha" in ids
    flagged = {m.id for m in result.herb_matches if m.contraindicated}
    assert "ashwagandha" in flagged
    assert all("Ayurvedic" in [t.value for t in m.traditions] for m in result.herb_matches)
    for edge in result.knowledge_edges:
        assert edge.source in ids and edge.target in ids
    _, subs = generator.calls[0]
    assert "Ashwagandha" in subs["herb_context"]


def test_openai_generator_sends_rendered_messages():
    sent = {}

    def create(**kwargs):
        sent.update(kwargs)
        return _completion("a calming formulation")

    generator = OpenAIGenerator(api_key="sk-test", model="gpt-test", temperature=0.2)
    generator.client = _stub_client(create)
    text = generator.generate(HERBALIST, {
        "user_profile": "p", "symptoms": "s", "goals": "g", "restrictions": "r", "herb_context": "ctx",
    })
    assert text == "a calming formulation"
    assert sent["model"] == "gpt-test"
    assert sent["temperature"] == 0.2
    assert [m["role"] for m in sent["messages"]] == ["system", "user"]
    assert "Knowledge graph context:\nctx" in sent["messages"][1]["content"]


def test_openai_generator_wraps_provider_errors():
    def create(**kwargs):
        raise OpenAIError("quota exceeded")

    generator = OpenAIGenerator(api_key="sk-test")
    generator.client = _stub_client(create)
    with pytest.raises(ProviderError, match="herbalist agent call failed") as excinfo:
        generator.generate(HERBALIST, {
            "user_profile": "p", "symptoms": "s", "goals": "g", "restrictions": "r", "herb_context": "ctx",
        })
    assert isinstance(excinfo.value.__cause__, OpenAIError)


def test_openai_generator_reads_env(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-env")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.9")
    generator = OpenAIGenerator(api_key="sk-test")
    assert generator.model == "gpt-env"
    assert generator.temperature == 0.9
