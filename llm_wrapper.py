"""
Agent orchestration for the Remedy Roots API.

Provides:
- OpenAIGenerator: renders an AgentPrompt and calls OpenAI chat completions
- build_substitutions: the shared key/value map every agent prompt is filled from
- run_agents: fans the four agent prompts out concurrently and joins the texts
- get_agent_responses: matcher -> herb context -> agents -> AgentResponse
"""

import hashlib
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Mapping, Optional, Sequence

from openai import OpenAI, OpenAIError

from agent_prompts import AGENT_PROMPTS, AgentPrompt
from herb_matcher import MatchQuery, build_herb_context, graph_connections_for, match_herbs
from pydantic_models import AgentRequest, AgentResponse, HerbMatchOut, KnowledgeEdge

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.6
DEFAULT_TIMEOUT_SECS = 60.0

NO_RESTRICTIONS = "None reported"
NO_KEY_DATES = "No specific launch dates provided"


class ProviderError(RuntimeError):
    """The text-generation provider failed to return a completion."""


def openai_api_key() -> Optional[str]:
    return os.environ.get("OPENAI_API_KEY") or None


def to_text(content) -> str:
    """Flatten chat message content (string, list of parts, or nothing) into plain text."""
    if not content:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict):
                parts.append(part.get("text") or "")
            else:
                parts.append(getattr(part, "text", None) or "")
        return "\n".join(parts)
    return str(content)


class OpenAIGenerator:
    """Text generation backed by the OpenAI chat completions API."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 temperature: Optional[float] = None, timeout_secs: Optional[float] = None):
        self.model = model or os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)
        self.temperature = temperature if temperature is not None else float(
            os.environ.get("OPENAI_TEMPERATURE", DEFAULT_TEMPERATURE))
        timeout = timeout_secs if timeout_secs is not None else float(
            os.environ.get("OPENAI_TIMEOUT", DEFAULT_TIMEOUT_SECS))
        self.client = OpenAI(api_key=api_key or openai_api_key(), timeout=timeout)

    def generate(self, prompt: AgentPrompt, substitutions: Mapping[str, object]) -> str:
        system_msg, user_msg = prompt.render(substitutions)
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "system", "content": system_msg}, {"role": "user", "content": user_msg}],
                temperature=self.temperature,
            )
        except OpenAIError as e:
            raise ProviderError(f"{prompt.name} agent call failed: {e}") from e
        text = to_text(resp.choices[0].message.content)
        logger.debug("raw %s output (%d chars): %s", prompt.name, len(text), text)
        return text


def _intake_digest(text: str) -> str:
    return hashlib.sha256(text.strip().lower().encode("utf-8")).hexdigest()[:12]


def build_substitutions(request: AgentRequest, herb_context: str) -> Dict[str, object]:
    key_dates = request.key_dates if request.key_dates and request.key_dates.strip() else NO_KEY_DATES
    return {
        "user_profile": request.user_profile,
        "symptoms": request.symptoms,
        "goals": request.goals,
        "restrictions": request.restrictions if request.restrictions is not None else NO_RESTRICTIONS,
        "herb_context": herb_context,
        "brand_voice": request.brand_voice,
        "campaign_goal": request.campaign_goal,
        "key_dates": key_dates,
        "target_platforms": ", ".join(p.value for p in request.target_platforms),
        "community_theme": request.community_theme,
        "community_ask": request.community_ask,
        "highlight_count": request.highlight_count,
    }


def run_agents(generator, substitutions: Mapping[str, object],
               prompts: Sequence[AgentPrompt] = AGENT_PROMPTS) -> Dict[str, str]:
    """
    Invoke every agent prompt concurrently and wait for all of them.
    The first provider failure is re-raised; nothing is retried.
    """
    with ThreadPoolExecutor(max_workers=len(prompts)) as executor:
        futures = [(p.name, executor.submit(generator.generate, p, substitutions)) for p in prompts]
        return {name: future.result() for name, future in futures}


def get_agent_responses(request: AgentRequest, generator) -> AgentResponse:
    """
    Primary orchestration:
    - rank herbs for the intake and derive their graph edges
    - summarize the matches into the shared herb context
    - run the four agents against one substitution map
    """
    matches = match_herbs(MatchQuery(
        symptoms=request.symptoms,
        goals=request.goals,
        restrictions=request.restrictions,
        traditions=frozenset(request.traditions),
    ))
    edges = graph_connections_for(matches)
    logger.info("intake %s matched %d herbs, %d edges, %d flagged",
                _intake_digest(request.symptoms + request.goals), len(matches), len(edges),
                sum(1 for m in matches if m.contraindicated))

    substitutions = build_substitutions(request, build_herb_context(matches))
    texts = run_agents(generator, substitutions)
    return AgentResponse(
        herbalist=texts["herbalist"],
        educator=texts["educator"],
        marketer=texts["marketer"],
        community=texts["community"],
        herb_matches=[HerbMatchOut.from_match(m) for m in matches],
        knowledge_edges=[KnowledgeEdge.from_edge(e) for e in edges],
    )
