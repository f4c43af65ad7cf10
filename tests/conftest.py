import pytest


@pytest.fixture(autouse=True)
def _clean_a2card_env(monkeypatch):
    """Keep tests independent of any A2CARD_* settings in the caller's shell."""
    for name in (
        "A2CARD_FALLBACK_IMAGE_URL",
        "A2CARD_MAX_DEPTH",
        "A2CARD_LOG_LEVEL",
        "A2CARD_LOG_REDACT_REPLIES",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
