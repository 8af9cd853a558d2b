import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from herb_graph import ALL_TRADITIONS, HerbEdge, HerbRecord, Tradition, get_all_herbs, get_edges

# Scoring weights: an exact token hit is the primary signal, a substring hit a weak one.
EXACT_MATCH_POINTS = 3
PARTIAL_MATCH_POINTS = 1
# Query limit on ranked results.
MAX_MATCHES = 8

MIN_TOKEN_LENGTH = 3
MIN_PARTIAL_LENGTH = 4

SYNONYMS = {
    "tired": "fatigue",
    "exhausted": "fatigue",
    "exhaustion": "fatigue",
    "burnout": "fatigue",
    "foggy": "fog",
    "anxious": "anxiety",
    "worry": "anxiety",
    "stressed": "stress",
    "insomnia": "sleep",
    "sleepless": "sleep",
    "concentration": "focus",
    "concentrate": "focus",
    "energetic": "energy",
    "immunity": "immune",
    "nauseous": "nausea",
    "bloated": "bloating",
    "headaches": "headache",
    "achy": "pain",
    "aches": "pain",
    "pregnant": "pregnancy",
    "thinner": "thinners",
    "anticoagulant": "thinners",
    "anticoagulants": "thinners",
}

STOPWORDS = frozenset({
    "and", "the", "with", "for", "from", "into", "that", "this", "are", "was", "have", "has",
    "not", "but", "all", "any", "use", "using", "during", "while", "when", "like", "just",
    "also", "some", "too", "more", "less", "very", "feel", "feeling", "want", "need", "our",
    "your", "their", "its", "about", "than", "then", "them", "they", "been", "being", "get",
    "help", "support", "avoid", "caution", "may", "herb", "herbs", "allergic", "allergy",
    "allergies", "sensitive", "sensitivity", "high", "over", "much", "what", "lately", "really",
    "often", "always", "since", "after", "before", "still", "only", "even", "lot", "bit",
})

_TOKEN_SPLIT = re.compile(r"[^a-z]+")


@dataclass(frozen=True)
class MatchQuery:
    symptoms: str = ""
    goals: str = ""
    restrictions: Optional[str] = None
    traditions: FrozenSet[Tradition] = frozenset()


@dataclass(frozen=True)
class HerbMatch:
    herb: HerbRecord
    score: int
    matched_keywords: Tuple[str, ...]
    contraindicated: bool


def tokenize(text: Optional[str]) -> List[str]:
    """Lower-case keywords in first-seen order, with synonyms folded and stopwords dropped."""
    if not text:
        return []
    seen = []
    for raw in _TOKEN_SPLIT.split(text.lower()):
        token = SYNONYMS.get(raw, raw)
        if len(token) < MIN_TOKEN_LENGTH or token in STOPWORDS or token in seen:
            continue
        seen.append(token)
    return seen


def _vocabulary(phrases: Iterable[str]) -> FrozenSet[str]:
    words = set()
    for phrase in phrases:
        words.update(tokenize(phrase))
    return frozenset(words)


def keyword_points(keyword: str, vocabulary: FrozenSet[str]) -> int:
    """Points one query keyword earns against a herb vocabulary (0 when it does not hit)."""
    if keyword in vocabulary:
        return EXACT_MATCH_POINTS
    if len(keyword) < MIN_PARTIAL_LENGTH:
        return 0
    for word in vocabulary:
        if len(word) >= MIN_PARTIAL_LENGTH and (keyword in word or word in keyword):
            return PARTIAL_MATCH_POINTS
    return 0


def _score(keywords: Sequence[str], herb: HerbRecord) -> Tuple[int, Tuple[str, ...]]:
    vocabulary = _vocabulary(herb.actions + herb.uses)
    score = 0
    matched = []
    for keyword in keywords:
        points = keyword_points(keyword, vocabulary)
        if points:
            score += points
            matched.append(keyword)
    return score, tuple(matched)


def is_contraindicated(restriction_keywords: Sequence[str], herb: HerbRecord) -> bool:
    cautions = _vocabulary(herb.cautions)
    return any(keyword_points(keyword, cautions) for keyword in restriction_keywords)


def match_herbs(query: MatchQuery) -> List[HerbMatch]:
    """
    Rank herbs for an intake query.

    Herbs outside the selected traditions are skipped; an empty selection means all.
    Herbs with no keyword score are discarded even when their tradition matches.
    Contraindicated herbs stay in the ranking with their flag set.
    """
    selected = {Tradition(t) for t in query.traditions} or set(ALL_TRADITIONS)
    keywords = tokenize(f"{query.symptoms} {query.goals}")
    if not keywords:
        return []
    restriction_keywords = tokenize(query.restrictions)

    matches = []
    for herb in get_all_herbs():
        if selected.isdisjoint(herb.traditions):
            continue
        score, matched = _score(keywords, herb)
        if score == 0:
            continue
        matches.append(HerbMatch(
            herb=herb,
            score=score,
            matched_keywords=matched,
            contraindicated=is_contraindicated(restriction_keywords, herb),
        ))

    # sorted() is stable, so ties keep table order
    matches = sorted(matches, key=lambda m: -m.score)
    return matches[:MAX_MATCHES]


def graph_connections_for(matches: Sequence[HerbMatch]) -> List[HerbEdge]:
    ids = {m.herb.id for m in matches}
    return [edge for edge in get_edges() if edge.source in ids and edge.target in ids]


def build_herb_context(matches: Sequence[HerbMatch]) -> str:
    """Plain-text summary of the matched herbs for the agent prompts."""
    if not matches:
        return ("No direct herb matches were found in the knowledge graph. "
                "Offer gentle, widely tolerated suggestions and invite a fuller intake.")
    blocks = []
    for m in matches:
        herb = m.herb
        lines = [
            f"- {herb.name} ({herb.latin_name}) | score {m.score}",
            f"  Traditions: {', '.join(t.value for t in herb.traditions)}",
            f"  Energetics: {', '.join(herb.energetics)}",
            f"  Actions: {', '.join(herb.actions)}",
            f"  Uses: {', '.join(herb.uses)}",
            f"  Cautions: {'; '.join(herb.cautions)}",
        ]
        if m.matched_keywords:
            lines.append(f"  Matched client keywords: {', '.join(m.matched_keywords)}")
        if m.contraindicated:
            lines.append("  SAFETY FLAG: overlaps the client's stated restrictions; review before recommending.")
        blocks.append("\n".join(lines))
    return "\n".join(blocks)
