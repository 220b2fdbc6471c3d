import pytest
from pydantic import ValidationError

from weather_aggregator.config import Settings, load_settings


@pytest.fixture()
def secrets_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture()
def no_secrets_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path / "missing"))


# ---------------------------------------------------------------------------
# Credential lookup
# ---------------------------------------------------------------------------

def test_secret_file_wins_over_environment(secrets_dir, monkeypatch):
    (secrets_dir / "weatherapi_key").write_text("from-secret\n")
    monkeypatch.setenv("WEATHERAPI_KEY", "from-env")

    assert load_settings().api_key == "from-secret"


def test_environment_is_the_fallback(secrets_dir, monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "from-env")

    assert load_settings().api_key == "from-env"


def test_environment_used_when_secrets_dir_is_missing(no_secrets_dir, monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "from-env")

    assert load_settings().api_key == "from-env"


def test_whitespace_key_counts_as_missing(no_secrets_dir, monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "   ")

    assert load_settings().api_key is None


def test_missing_key_is_not_fatal(no_secrets_dir, monkeypatch):
    monkeypatch.delenv("WEATHERAPI_KEY", raising=False)

    assert load_settings().api_key is None


# ---------------------------------------------------------------------------
# Default location
# ---------------------------------------------------------------------------

def test_default_location_is_trimmed():
    assert Settings(default_location="  Cape Town ").default_location == "Cape Town"


def test_default_location_from_environment_is_trimmed(no_secrets_dir, monkeypatch):
    monkeypatch.setenv("DEFAULT_LOCATION", "  Durban  ")

    assert load_settings().default_location == "Durban"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_default_location_is_rejected(value):
    with pytest.raises(ValidationError):
        Settings(default_location=value)
