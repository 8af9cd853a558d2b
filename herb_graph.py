"""
Remedy Roots herb knowledge graph.

The herb and edge tables are compiled into the module and built once at import.
Nothing in the project mutates them; callers get tuples of frozen records.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Tradition(str, Enum):
    AFRICAN_DIASPORA = "African Diaspora"
    AYURVEDIC = "Ayurvedic"
    TCM = "Traditional Chinese Medicine"


ALL_TRADITIONS: Tuple[Tradition, ...] = tuple(Tradition)

AFR = Tradition.AFRICAN_DIASPORA
AYU = Tradition.AYURVEDIC
TCM = Tradition.TCM


@dataclass(frozen=True)
class HerbRecord:
    id: str
    name: str
    latin_name: str
    traditions: Tuple[Tradition, ...]
    energetics: Tuple[str, ...]
    actions: Tuple[str, ...]
    uses: Tuple[str, ...]
    cautions: Tuple[str, ...]
    pairings: Tuple[str, ...]


@dataclass(frozen=True)
class HerbEdge:
    """Relationship between two herbs. The pair is unordered; source/target is only declaration order."""
    source: str
    target: str
    label: str


_HERBS: Tuple[HerbRecord, ...] = (
    HerbRecord(
        id="ashwagandha",
        name="Ashwagandha",
        latin_name="Withania somnifera",
        traditions=(AYU,),
        energetics=("warming", "heavy", "grounding"),
        actions=("adaptogenic", "calming", "energizing", "restorative"),
        uses=("stress", "fatigue", "restless sleep", "low energy"),
        cautions=("avoid with nightshade sensitivity", "avoid in pregnancy", "caution with thyroid medication"),
        pairings=("shatavari", "tulsi", "reishi"),
    ),
    HerbRecord(
        id="brahmi",
        name="Brahmi",
        latin_name="Bacopa monnieri",
        traditions=(AYU,),
        energetics=("cooling", "bitter"),
        actions=("clarifying", "nootropic", "calming"),
        uses=("brain fog", "focus", "memory", "anxiety"),
        cautions=("may cause digestive upset on an empty stomach", "caution with thyroid medication"),
        pairings=("gotu-kola", "tulsi"),
    ),
    HerbRecord(
        id="tulsi",
        name="Tulsi (Holy Basil)",
        latin_name="Ocimum tenuiflorum",
        traditions=(AYU,),
        energetics=("warming", "pungent", "light"),
        actions=("adaptogenic", "uplifting", "immune-supportive", "clarifying"),
        uses=("stress", "immune resilience", "focus", "respiratory health"),
        cautions=("may lower blood sugar", "avoid large amounts in pregnancy"),
        pairings=("ashwagandha", "brahmi", "ginger"),
    ),
    HerbRecord(
        id="shatavari",
        name="Shatavari",
        latin_name="Asparagus racemosus",
        traditions=(AYU,),
        energetics=("cooling", "moistening", "sweet"),
        actions=("nourishing", "rejuvenating", "soothing"),
        uses=("hormonal balance", "dryness", "caretaker depletion", "digestion"),
        cautions=("avoid with asparagus allergy", "avoid with excess congestion"),
        pairings=("ashwagandha",),
    ),
    HerbRecord(
        id="triphala",
        name="Triphala",
        latin_name="Emblica officinalis, Terminalia bellirica, Terminalia chebula",
        traditions=(AYU,),
        energetics=("balancing", "astringent"),
        actions=("digestive", "detoxifying", "gentle laxative"),
        uses=("digestion", "bloating", "constipation", "detox"),
        cautions=("avoid in pregnancy", "avoid with diarrhea"),
        pairings=("ginger",),
    ),
    HerbRecord(
        id="ginger",
        name="Ginger",
        latin_name="Zingiber officinale",
        traditions=(AFR, AYU, TCM),
        energetics=("very warming", "pungent", "drying"),
        actions=("digestive", "warming", "anti-nausea", "circulatory"),
        uses=("nausea", "bloating", "cold hands", "sluggish digestion", "travel"),
        cautions=("very warming; avoid with heat signs", "caution with blood thinners"),
        pairings=("turmeric", "tulsi", "hibiscus", "lemongrass"),
    ),
    HerbRecord(
        id="turmeric",
        name="Turmeric",
        latin_name="Curcuma longa",
        traditions=(AFR, AYU),
        energetics=("warming", "bitter", "drying"),
        actions=("anti-inflammatory", "antioxidant", "liver-supportive"),
        uses=("joint pain", "inflammation", "skin", "recovery"),
        cautions=("caution with gallbladder issues", "caution with blood thinners"),
        pairings=("ginger", "moringa"),
    ),
    HerbRecord(
        id="gotu-kola",
        name="Gotu Kola",
        latin_name="Centella asiatica",
        traditions=(AYU, TCM),
        energetics=("cooling", "bitter"),
        actions=("clarifying", "calming", "circulatory"),
        uses=("focus", "memory", "brain fog", "skin healing"),
        cautions=("avoid with liver disease", "avoid in pregnancy"),
        pairings=("brahmi",),
    ),
    HerbRecord(
        id="ginseng",
        name="Asian Ginseng",
        latin_name="Panax ginseng",
        traditions=(TCM,),
        energetics=("warming", "sweet"),
        actions=("energizing", "tonifying", "adaptogenic"),
        uses=("fatigue", "low energy", "focus", "recovery"),
        cautions=("avoid with high blood pressure", "very warming; avoid with heat signs", "avoid with stimulants"),
        pairings=("astragalus", "schisandra"),
    ),
    HerbRecord(
        id="astragalus",
        name="Astragalus",
        latin_name="Astragalus membranaceus",
        traditions=(TCM,),
        energetics=("slightly warming", "sweet"),
        actions=("immune-supportive", "tonifying", "energizing"),
        uses=("immune resilience", "fatigue", "frequent colds", "travel"),
        cautions=("avoid during acute infection", "caution with immunosuppressants"),
        pairings=("ginseng", "reishi"),
    ),
    HerbRecord(
        id="reishi",
        name="Reishi",
        latin_name="Ganoderma lucidum",
        traditions=(TCM,),
        energetics=("neutral", "bitter"),
        actions=("calming", "immune-supportive", "adaptogenic"),
        uses=("stress", "restless sleep", "immune resilience"),
        cautions=("caution with blood thinners", "discontinue before surgery"),
        pairings=("astragalus", "ashwagandha"),
    ),
    HerbRecord(
        id="schisandra",
        name="Schisandra",
        latin_name="Schisandra chinensis",
        traditions=(TCM,),
        energetics=("warm", "sour"),
        actions=("adaptogenic", "clarifying", "astringent"),
        uses=("focus", "endurance", "liver health", "stress"),
        cautions=("avoid in pregnancy", "avoid with acute cough or fever"),
        pairings=("ginseng",),
    ),
    HerbRecord(
        id="chrysanthemum",
        name="Chrysanthemum",
        latin_name="Chrysanthemum morifolium",
        traditions=(TCM,),
        energetics=("cooling", "sweet", "bitter"),
        actions=("cooling", "clarifying", "soothing"),
        uses=("eye strain", "headache", "heat signs"),
        cautions=("avoid with ragweed or daisy allergy",),
        pairings=("hibiscus",),
    ),
    HerbRecord(
        id="moringa",
        name="Moringa",
        latin_name="Moringa oleifera",
        traditions=(AFR, AYU),
        energetics=("neutral", "nourishing"),
        actions=("nourishing", "energizing", "antioxidant"),
        uses=("low energy", "fatigue", "nutritional gaps", "immune resilience"),
        cautions=("avoid root and bark in pregnancy", "may lower blood sugar"),
        pairings=("turmeric", "hibiscus", "bitter-leaf"),
    ),
    HerbRecord(
        id="hibiscus",
        name="Hibiscus (Sorrel)",
        latin_name="Hibiscus sabdariffa",
        traditions=(AFR,),
        energetics=("cooling", "sour"),
        actions=("cooling", "heart-supportive", "antioxidant"),
        uses=("blood pressure balance", "hydration", "summer heat"),
        cautions=("may lower blood pressure", "caution with blood pressure medication"),
        pairings=("ginger", "moringa", "rooibos"),
    ),
    HerbRecord(
        id="rooibos",
        name="Rooibos",
        latin_name="Aspalathus linearis",
        traditions=(AFR,),
        energetics=("neutral", "sweet"),
        actions=("calming", "antioxidant"),
        uses=("evening restlessness", "restless sleep", "hydration"),
        cautions=("caution with hormone-sensitive conditions",),
        pairings=("hibiscus",),
    ),
    HerbRecord(
        id="bitter-leaf",
        name="Bitter Leaf",
        latin_name="Vernonia amygdalina",
        traditions=(AFR,),
        energetics=("cooling", "bitter"),
        actions=("digestive", "detoxifying", "blood-sugar balancing"),
        uses=("digestion", "sluggish liver", "blood sugar balance"),
        cautions=("avoid in pregnancy", "may lower blood sugar"),
        pairings=("moringa",),
    ),
    HerbRecord(
        id="lemongrass",
        name="Lemongrass (Fever Grass)",
        latin_name="Cymbopogon citratus",
        traditions=(AFR,),
        energetics=("cooling", "aromatic"),
        actions=("calming", "digestive", "uplifting"),
        uses=("stress", "bloating", "fever", "evening restlessness"),
        cautions=("avoid large amounts in pregnancy",),
        pairings=("ginger", "kinkeliba"),
    ),
    HerbRecord(
        id="kinkeliba",
        name="Kinkeliba",
        latin_name="Combretum micranthum",
        traditions=(AFR,),
        energetics=("cooling", "bitter"),
        actions=("detoxifying", "digestive", "diuretic"),
        uses=("digestion", "morning ritual", "detox"),
        cautions=("avoid with kidney disease",),
        pairings=("lemongrass",),
    ),
)

_EDGES: Tuple[HerbEdge, ...] = (
    HerbEdge("ashwagandha", "tulsi", "adaptogenic stress shield"),
    HerbEdge("ashwagandha", "shatavari", "rejuvenating caretaker tonic"),
    HerbEdge("brahmi", "gotu-kola", "clarifying focus pairing"),
    HerbEdge("tulsi", "brahmi", "bright mind morning tonic"),
    HerbEdge("ginger", "turmeric", "synergistic anti-inflammatory duo"),
    HerbEdge("ginger", "triphala", "synergistic digestive duo"),
    HerbEdge("ginseng", "astragalus", "energizing qi tonic"),
    HerbEdge("ginseng", "schisandra", "endurance and focus formula"),
    HerbEdge("astragalus", "reishi", "immune resilience pathway"),
    HerbEdge("reishi", "ashwagandha", "cross-tradition calming adaptogens"),
    HerbEdge("moringa", "turmeric", "nourishing antioxidant blend"),
    HerbEdge("moringa", "bitter-leaf", "blood sugar balancing greens"),
    HerbEdge("hibiscus", "ginger", "warming and cooling counterbalance"),
    HerbEdge("hibiscus", "rooibos", "caffeine-free evening blend"),
    HerbEdge("chrysanthemum", "hibiscus", "heat-clearing flower tea"),
    HerbEdge("lemongrass", "ginger", "diaspora digestive tea ritual"),
    HerbEdge("kinkeliba", "lemongrass", "morning cleansing brew"),
)


def validate_graph(herbs: Tuple[HerbRecord, ...], edges: Tuple[HerbEdge, ...]) -> Dict[str, HerbRecord]:
    """Check ids are unique and every edge/pairing names a known herb. Returns the id index."""
    index: Dict[str, HerbRecord] = {}
    for herb in herbs:
        if herb.id in index:
            raise ValueError(f"duplicate herb id: {herb.id}")
        index[herb.id] = herb
    for herb in herbs:
        for paired in herb.pairings:
            if paired not in index:
                raise ValueError(f"herb {herb.id} pairs with unknown herb {paired}")
    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in index:
                raise ValueError(f"edge '{edge.label}' references unknown herb {endpoint}")
    return index


_INDEX = validate_graph(_HERBS, _EDGES)


def get_all_herbs() -> Tuple[HerbRecord, ...]:
    return _HERBS


def get_edges() -> Tuple[HerbEdge, ...]:
    return _EDGES


def get_herb(herb_id: str) -> Optional[HerbRecord]:
    return _INDEX.get(herb_id)
