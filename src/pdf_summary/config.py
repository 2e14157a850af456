import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from pdf_summary.errors import ConfigurationError

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
TOKEN_LIMIT = 4000
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration for a summarization run."""

    api_key: str
    model: str = DEFAULT_MODEL
    api_url: str = DEFAULT_API_URL
    max_tokens: int = TOKEN_LIMIT
    http_proxy: Optional[str] = None
    request_timeout: Optional[float] = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _parse_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as err:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from err


def settings_from_env(env: Mapping[str, str], model: Optional[str] = None) -> Settings:
    """
    Build Settings from an environment mapping.

    Args:
        env: Mapping of environment variables (usually ``os.environ``).
        model: Model identifier overriding OPENAI_MODEL.

    Returns:
        Settings: Validated settings.

    Raises:
        ConfigurationError: If the API key or model identifier is missing, or a
            numeric variable cannot be parsed.
    """
    api_key = env.get("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY is missing")

    if model is None:
        model = env.get("OPENAI_MODEL", DEFAULT_MODEL)
    model = model.strip()
    if not model:
        raise ConfigurationError("AI model name is missing")

    # Proxy values like "socks5://..." or stray text are ignored.
    proxy = env.get("HTTP_PROXY", "").strip()
    http_proxy = proxy if proxy.startswith("http") else None

    max_tokens = _parse_number(env, "TOKEN_LIMIT", TOKEN_LIMIT, int)
    if max_tokens <= 0:
        raise ConfigurationError(f"TOKEN_LIMIT must be positive, got {max_tokens}")

    timeout = _parse_number(env, "REQUEST_TIMEOUT", DEFAULT_TIMEOUT, float)

    return Settings(
        api_key=api_key,
        model=model,
        api_url=env.get("OPENAI_API_URL", "").strip() or DEFAULT_API_URL,
        max_tokens=max_tokens,
        http_proxy=http_proxy,
        request_timeout=timeout if timeout > 0 else None,
        log_level=env.get("LOG_LEVEL", "").strip() or "INFO",
    )


def load_env(env_file: Optional[str] = None) -> None:
    """Load ``.env`` into the process environment without overriding variables already set."""
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)


def load_settings(env_file: Optional[str] = None, model: Optional[str] = None) -> Settings:
    """
    Load ``.env`` (without overriding variables already set) and resolve Settings.

    Args:
        env_file: Explicit dotenv path. Defaults to searching from the working directory.
        model: Model identifier overriding OPENAI_MODEL.
    """
    load_env(env_file)
    return settings_from_env(os.environ, model=model)

