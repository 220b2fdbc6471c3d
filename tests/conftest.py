import os

# Minimal env so pydantic-settings doesn't require a real .env file,
# set before any weather_aggregator module builds its settings.
os.environ.setdefault("WEATHERAPI_KEY", "test-key")
os.environ.setdefault("CACHE_BACKEND", "memory")
os.environ.setdefault("SECRETS_DIR", "/nonexistent")
