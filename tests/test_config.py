from bid_readiness.config import load_settings


def test_load_settings_from_env(monkeypatch):
    """Paths come from the environment; blank values mean "not configured"."""
    monkeypatch.setenv("BID_READINESS_CONFIG_PATH", "/etc/bid/readiness.yaml")
    monkeypatch.setenv("BID_READINESS_TAXONOMY_PATH", "  ")
    settings = load_settings()
    assert settings["BID_READINESS_CONFIG_PATH"] == "/etc/bid/readiness.yaml"
    assert settings["BID_READINESS_TAXONOMY_PATH"] is None


def test_load_settings_defaults_to_unconfigured():
    settings = load_settings()
    assert settings == {
        "BID_READINESS_CONFIG_PATH": None,
        "BID_READINESS_TAXONOMY_PATH": None,
    }
