# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from model.api import HealthResponse
from util.errors import register_error_handlers

logging.basicConfig(
    level=logging.DEBUG if settings.APP_ENV == Environment.DEV else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    print(f"{Color.GREEN}Server Started{Color.RESET}")

    if not settings.FACTCHECK_API_KEY:
        print(f"{Color.YELLOW}FACTCHECK_API_KEY is not set; claim search will fail{Color.RESET}")
    if not settings.SAFE_BROWSING_API_KEY:
        print(f"{Color.YELLOW}SAFE_BROWSING_API_KEY is not set; URL checks will fail{Color.RESET}")

    try:
        yield
    finally:
        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=False,
    allow_methods=["GET"],  # Allowed HTTP Methods
    allow_headers=["Content-Type", "Accept"],  # Allowed HTTP Headers
)


@app.get("/healthz", response_model=HealthResponse)
async def healthz():
    return {"ok": True}


register_error_handlers(app)
routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=reload)
