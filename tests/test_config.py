import pytest

from a2card.config import (
    DEFAULT_FALLBACK_IMAGE_URL,
    DEFAULT_MAX_DEPTH,
    A2CardConfig,
    load_config,
    max_depth_ceiling,
)
from a2card.errors import ConfigError


def test_defaults_without_env():
    config = load_config({})
    assert config.fallback_image_url == DEFAULT_FALLBACK_IMAGE_URL
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.log_level == "INFO"


def test_env_overrides():
    config = load_config(
        {
            "A2CARD_FALLBACK_IMAGE_URL": "https://cdn.test/none.png",
            "A2CARD_MAX_DEPTH": "12",
            "A2CARD_LOG_LEVEL": "debug",
        }
    )
    assert config.fallback_image_url == "https://cdn.test/none.png"
    assert config.max_depth == 12
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["zero", "0", "-4", ""])
def test_invalid_max_depth_falls_back(raw):
    assert load_config({"A2CARD_MAX_DEPTH": raw}).max_depth == DEFAULT_MAX_DEPTH


def test_load_config_reads_process_env(monkeypatch):
    monkeypatch.setenv("A2CARD_MAX_DEPTH", "5")
    assert load_config().max_depth == 5


def test_explicit_config_is_validated():
    with pytest.raises(ConfigError):
        A2CardConfig(max_depth=0)
    with pytest.raises(ConfigError):
        A2CardConfig(fallback_image_url="")


def test_max_depth_is_clamped_to_recursion_ceiling():
    ceiling = max_depth_ceiling()
    assert load_config({"A2CARD_MAX_DEPTH": "5000000"}).max_depth == ceiling
    assert A2CardConfig(max_depth=ceiling + 1).max_depth == ceiling
    assert A2CardConfig(max_depth=ceiling).max_depth == ceiling
