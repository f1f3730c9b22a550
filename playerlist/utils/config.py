from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).parent.parent
ENV_PATH = PACKAGE_DIR.parent / ".env"

load_dotenv(dotenv_path=ENV_PATH)


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)) or default)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./database.db"
    host: str = "0.0.0.0"
    port: int = 3000
    pool_size: int = 5
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_pre_ping: bool = True
    templates_dir: Path = PACKAGE_DIR / "templates"
    static_dir: Path = PACKAGE_DIR / "static"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            host=os.getenv("HOST", cls.host),
            port=_env_int("PORT", cls.port),
            pool_size=_env_int("DB_POOL_SIZE", cls.pool_size),
            max_overflow=_env_int("DB_MAX_OVERFLOW", cls.max_overflow),
            pool_timeout=_env_int("DB_POOL_TIMEOUT", cls.pool_timeout),
            pool_pre_ping=_env_bool("DB_POOL_PRE_PING", cls.pool_pre_ping),
            templates_dir=Path(os.getenv("TEMPLATES_DIR", str(cls.templates_dir))),
            static_dir=Path(os.getenv("STATIC_DIR", str(cls.static_dir))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
