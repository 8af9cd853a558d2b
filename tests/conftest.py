import pytest

from app import create_app
from tests.fakes import FakeGenerator


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def client(fake_generator):
    app = create_app(generator=fake_generator)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def intake():
    return {
        "user_profile": "31-year-old creative entrepreneur caring for family elders.",
        "symptoms": "Chronic fatigue, brain fog, and high stress with evening restlessness.",
        "goals": "Restore vibrant energy and sharpen focus.",
        "restrictions": "Allergic to nightshades; sensitive to very warming herbs.",
        "traditions": ["Ayurvedic"],
        "brand_voice": "Rooted and warm.",
        "campaign_goal": "Six-week storytelling wave.",
        "target_platforms": ["Instagram", "TikTok"],
        "key_dates": "",
        "community_theme": "Caretaker resilience.",
        "community_ask": "Share a grounding ritual.",
        "highlight_count": "4",
    }
