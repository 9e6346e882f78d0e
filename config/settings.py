# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.constants import ExternalURIs
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(Environment.DEV.value, validation_alias="APP_ENV")
    ALLOWED_ORIGIN: str = Field(
        "http://localhost:8000", validation_alias="ALLOWED_ORIGIN"
    )

    # Credentials (checked per request, never at startup)
    FACTCHECK_API_KEY: str | None = Field(None, validation_alias="FACTCHECK_API_KEY")
    SAFE_BROWSING_API_KEY: str | None = Field(
        None, validation_alias="SAFE_BROWSING_API_KEY"
    )

    # Upstream
    FACTCHECK_API_URL: str = ExternalURIs.CLAIM_SEARCH
    SAFE_BROWSING_API_URL: str = ExternalURIs.THREAT_MATCHES_FIND
    # Sent as Referer in case the key is restricted to HTTP referrers
    FACTCHECK_REFERER: str = "http://localhost:3000/"
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # View state
    VIEW_STATE_TTL_SECONDS: int = 1800
    VIEW_STATE_MAX_ENTRIES: int = 1000


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
