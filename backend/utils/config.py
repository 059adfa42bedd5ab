import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7  # 1 week
BCRYPT_ROUNDS = 10


class ConfigError(RuntimeError):
    """Raised when the environment cannot produce a usable configuration."""


# Load environment variables
def load_dotenv():
    env_path = Path(__file__).parent.parent.with_name(".env")
    if not env_path.exists():
        return
    for line in env_path.read_text().splitlines():
        if not line or line.strip().startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")


def _normalise_prefix(raw: str) -> str:
    """Turn `api`, `/api/` or `/api` into `/api`; blank means no prefix."""
    stripped = raw.strip().strip("/")
    return f"/{stripped}" if stripped else ""


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    access_token_expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES
    database_url: Optional[str] = None
    bcrypt_rounds: int = BCRYPT_ROUNDS
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default=("*",))
    api_prefix: str = "/api"

    def __post_init__(self):
        if not self.jwt_secret or not self.jwt_secret.strip():
            raise ConfigError("JWT_SECRET must be set to a non-empty value")
        if self.access_token_expire_minutes <= 0:
            raise ConfigError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ConfigError("BCRYPT_ROUNDS must be between 4 and 31")
        if self.api_prefix and (not self.api_prefix.startswith("/") or self.api_prefix.endswith("/")):
            raise ConfigError(f"API_PREFIX must start with '/' and not end with one, got {self.api_prefix!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment (after loading `.env`).

        There is no fallback signing secret: a missing JWT_SECRET stops the app
        from starting.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        secret = environ.get("JWT_SECRET", "")
        if not secret.strip():
            raise ConfigError("JWT_SECRET is not set; refusing to start without a signing secret")

        origins = tuple(o.strip() for o in environ.get("CORS_ORIGINS", "*").split(",") if o.strip())
        return cls(
            jwt_secret=secret,
            access_token_expire_minutes=_int_setting(environ, "ACCESS_TOKEN_EXPIRE_MINUTES", ACCESS_TOKEN_EXPIRE_MINUTES),
            database_url=environ.get("DATABASE_URL") or None,
            bcrypt_rounds=_int_setting(environ, "BCRYPT_ROUNDS", BCRYPT_ROUNDS),
            log_level=environ.get("LOG_LEVEL", "INFO"),
            cors_origins=origins or ("*",),
            api_prefix=_normalise_prefix(environ.get("API_PREFIX", "/api")),
        )
