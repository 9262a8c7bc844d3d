import os


def get_settings_module() -> str:
    # Pick the settings module from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def env_list(name: str, default: str) -> list[str]:
    """Comma-separated environment variable as a list of trimmed names."""
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]
