# routes.py
from fastapi import FastAPI
from controller.relay_controller import relay_router
from controller.view_controller import view_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(relay_router)
    app.include_router(view_router)
