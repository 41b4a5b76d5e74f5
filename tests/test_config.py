import pytest

from xkcdgeohash.domain.errors import InvalidInput
from xkcdgeohash.infrastructure.config import Settings, build_price_provider
from xkcdgeohash.infrastructure.dow_data.http_adapter import (
    DEFAULT_DOW_SOURCES,
    DEFAULT_TIMEOUT_SECONDS,
)


def test_defaults_when_environment_is_empty():
    settings = Settings.from_env({})
    assert settings.dow_sources == DEFAULT_DOW_SOURCES
    assert settings.http_timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.log_level == "WARNING"


def test_reads_overrides():
    settings = Settings.from_env(
        {
            "XKCDGEOHASH_DOW_SOURCES": "http://mirror.example/djia, https://backup.example/dow/ ,",
            "XKCDGEOHASH_HTTP_TIMEOUT": "2.5",
            "XKCDGEOHASH_LOG_LEVEL": "debug",
        }
    )
    assert settings.dow_sources == (
        "http://mirror.example/djia/",
        "https://backup.example/dow/",
    )
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults():
    settings = Settings.from_env(
        {"XKCDGEOHASH_DOW_SOURCES": "  ", "XKCDGEOHASH_HTTP_TIMEOUT": "", "XKCDGEOHASH_LOG_LEVEL": ""}
    )
    assert settings == Settings()


@pytest.mark.parametrize(
    "name, value",
    [
        ("XKCDGEOHASH_DOW_SOURCES", "ftp://mirror.example/djia/"),
        ("XKCDGEOHASH_HTTP_TIMEOUT", "soon"),
        ("XKCDGEOHASH_HTTP_TIMEOUT", "0"),
        ("XKCDGEOHASH_HTTP_TIMEOUT", "-3"),
        ("XKCDGEOHASH_HTTP_TIMEOUT", "nan"),
        ("XKCDGEOHASH_LOG_LEVEL", "LOUD"),
    ],
)
def test_rejects_unusable_values(name, value):
    with pytest.raises(InvalidInput, match=name):
        Settings.from_env({name: value})


def test_build_price_provider_uses_settings():
    settings = Settings(dow_sources=("http://mirror.example/djia/",), http_timeout=3.0)
    provider = build_price_provider(settings)
    assert provider.sources == ("http://mirror.example/djia/",)
    assert provider.timeout == 3.0
