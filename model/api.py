# model/api.py
from typing import Any
from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool


class RelayResponse(BaseModel):
    """Upstream status and body, passed through untouched."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return self.status_code // 100 == 2

    def error_message(self) -> str:
        err = self.body.get("error") if isinstance(self.body, dict) else None
        if isinstance(err, str) and err:
            return err
        if isinstance(err, dict) and err.get("message"):
            # Google APIs nest the message: {"error": {"code", "message", "status"}}
            return str(err["message"])
        return f"HTTP {self.status_code}"
