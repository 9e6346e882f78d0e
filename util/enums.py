# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorDetail(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    MISSING_QUERY = ErrorDetail("Missing query", status.HTTP_400_BAD_REQUEST)
    MISSING_URL = ErrorDetail("Missing url", status.HTTP_400_BAD_REQUEST)
    MISSING_FACTCHECK_KEY = ErrorDetail(
        "Missing FACTCHECK_API_KEY", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    MISSING_SAFE_BROWSING_KEY = ErrorDetail(
        "Missing SAFE_BROWSING_API_KEY", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    UPSTREAM_UNREACHABLE = ErrorDetail(
        "Upstream request failed", status.HTTP_502_BAD_GATEWAY
    )


class Language(str, Enum):
    TH = "th"
    EN = "en"
