"""
Pytest configuration and fixtures for textcell tests
"""

import pytest

from textcell.core.config.settings import Settings
from textcell.text.value import TextValue


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with verbose logging"""
    return Settings(
        ENVIRONMENT="testing",
        DEBUG=False,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def sample_text() -> str:
    """Sample sentence for testing"""
    return "SG-1 returns from an off-world mission"


@pytest.fixture
def make_value():
    """Factory for TextValue instances"""

    def _make(value="", encoding="UTF-8") -> TextValue:
        return TextValue.create(value, encoding)

    return _make


@pytest.fixture
def recipe_file(tmp_path):
    """Create a temporary YAML recipe"""
    content = """
name: shout
steps:
  - op: trim
  - op: upper
  - op: append
    args: ["!"]
"""
    file_path = tmp_path / "shout.yaml"
    file_path.write_text(content.strip())
    return file_path
