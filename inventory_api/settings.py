# inventory_api/settings.py
import logging
import os
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel
from rich.logging import RichHandler

load_dotenv()

PERMISSIVE_DEV = "permissive-dev"
RESTRICTED_PROD = "restricted-prod"

# deployment environment -> default CORS policy
ENVIRONMENT_POLICIES: Dict[str, str] = {
    "development": PERMISSIVE_DEV,
    "production": RESTRICTED_PROD,
}


class CorsPolicy(BaseModel):
    name: str
    allow_origins: List[str]
    allow_methods: List[str]
    allow_headers: List[str]
    allow_credentials: bool = False


class Settings(BaseModel):
    environment: str = "development"
    cors_policy: str = PERMISSIVE_DEV
    allowed_origins: List[str] = []
    host: str = "127.0.0.1"
    port: int = 5107
    log_level: str = "INFO"


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings() -> Settings:
    environment = os.getenv("INVENTORYHUB_ENV", "development").strip().lower()
    policy = os.getenv("INVENTORYHUB_CORS_POLICY") or ENVIRONMENT_POLICIES.get(environment, RESTRICTED_PROD)
    return Settings(
        environment=environment,
        cors_policy=policy,
        allowed_origins=_split_origins(os.getenv("INVENTORYHUB_ALLOWED_ORIGINS")),
        host=os.getenv("INVENTORYHUB_HOST", "127.0.0.1"),
        port=int(os.getenv("INVENTORYHUB_PORT", "5107")),
        log_level=os.getenv("INVENTORYHUB_LOG_LEVEL", "INFO").upper(),
    )


def build_cors_policy(name: str, allowed_origins: Optional[List[str]] = None) -> CorsPolicy:
    if name == PERMISSIVE_DEV:
        # development only: any origin, header and method
        return CorsPolicy(name=name, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    if name == RESTRICTED_PROD:
        return CorsPolicy(
            name=name,
            allow_origins=list(allowed_origins or []),
            allow_methods=["GET"],
            allow_headers=["Accept", "Content-Type"],
        )
    raise ValueError(f"unknown CORS policy: {name!r}")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
