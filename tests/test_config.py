from hoop_detective.config import DEFAULT_API_BASE, Config


def test_from_env_reads_api_key(monkeypatch):
    monkeypatch.setenv("BALLDONTLIE_API_KEY", "  secret-key ")
    monkeypatch.delenv("BALLDONTLIE_API_BASE", raising=False)

    config = Config.from_env()

    assert config.api_key == "secret-key"
    assert config.api_base_url == DEFAULT_API_BASE


def test_placeholder_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("BALLDONTLIE_API_KEY", "your_api_key_here")

    assert Config.from_env().api_key is None


def test_base_url_override(monkeypatch):
    monkeypatch.setenv("BALLDONTLIE_API_KEY", "k")
    monkeypatch.setenv("BALLDONTLIE_API_BASE", "http://localhost:9000/v1/")

    assert Config.from_env().api_base_url == "http://localhost:9000/v1"


def test_defaults():
    config = Config()

    assert config.per_page == 100
    assert config.max_pages == 10
    assert config.request_timeout == 30.0
