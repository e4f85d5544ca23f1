"""Shared test configuration, fixtures and pytest markers."""

import pytest

from api.router import limiter

SAMPLE_RESUME = """
John Doe
Software Engineer

EXPERIENCE
Senior Blockchain Developer, Aptos Labs (2021-Present)
- Developed smart contracts using Move language
- Implemented blockchain solutions for enterprise clients
- Led a team of 5 developers on a DeFi project

AI Integration Specialist, Tech Innovations (2018-2021)
- Integrated machine learning models into production systems
- Worked with Python, TensorFlow, and PyTorch
- Developed APIs for AI model deployment

SKILLS
Blockchain, Smart Contracts, Aptos, Move, Solidity, React, JavaScript, Python, Machine Learning, API Integration

EDUCATION
Master of Computer Science, Stanford University (2018)
Bachelor of Computer Science, MIT (2016)
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME
