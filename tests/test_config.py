import pytest

from a11y_analyzer.config import load_config

ENV_VARS = (
    "A11Y_USER_AGENT",
    "A11Y_TIMEOUT",
    "A11Y_RULES",
    "A11Y_PARALLEL_RULES",
    "A11Y_OUTPUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so teardown also removes values load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep stray .env files in cwd or home out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_defaults_without_env():
    config = load_config()
    assert config.user_agent == "Accessibility-Analyzer/1.0"
    assert config.timeout == 10
    assert config.rules == []
    assert config.parallel_rules is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("A11Y_TIMEOUT", "2.5")
    monkeypatch.setenv("A11Y_RULES", "image-alt,landmarks")
    monkeypatch.setenv("A11Y_PARALLEL_RULES", "yes")
    monkeypatch.setenv("A11Y_OUTPUT", "json")
    config = load_config()
    assert config.timeout == 2.5
    assert config.rules == ["image-alt", "landmarks"]
    assert config.parallel_rules is True
    assert config.output == "json"


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("A11Y_USER_AGENT=TestAgent/2.0\nA11Y_TIMEOUT=5\n")
    config = load_config(env_file)
    assert config.user_agent == "TestAgent/2.0"
    assert config.timeout == 5
