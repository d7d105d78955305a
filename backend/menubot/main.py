"""
FastAPI application entry point (development relay server)
"""
import logging
from pathlib import Path
from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO)
logging.getLogger("relay").setLevel(logging.INFO)
logging.getLogger("completion").setLevel(logging.INFO)

# Load environment variables FIRST, before settings are read
# Explicitly look for .env in the backend directory (parent of menubot/)
backend_dir = Path(__file__).parent.parent
env_path = backend_dir / ".env"
load_dotenv(dotenv_path=env_path, override=True)

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from menubot.config import get_settings
from menubot.errors import RelayError
from menubot.models.chat import ErrorResponse
from menubot.routes import chat
from menubot.services.completion import CompletionClient

log = logging.getLogger("menubot")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle — one pooled completion client per process."""
    settings = get_settings()
    app.state.completion_client = CompletionClient(
        base_url=settings.openai_api_url,
        timeout=settings.request_timeout,
    )
    log.info(
        f"Relay ready: mode={settings.app_env} model={settings.model} "
        f"key_set={settings.api_key_configured()}"
    )
    yield
    await app.state.completion_client.close()


app = FastAPI(
    title="Dinner Menu Chatbot API",
    description="Relay between the chat widget and the OpenAI completion API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware - allow the widget to call the relay
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content=ErrorResponse(error=f"Invalid request: {detail}").model_dump())


# Include routers
app.include_router(chat.router, prefix="/api", tags=["chat"])


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "service": "Dinner Menu Chatbot API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "chat": "/api/chat (POST)",
            "status": "/api/status",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "menubot-relay"}


def run():
    import uvicorn

    uvicorn.run("menubot.main:app", host="127.0.0.1", port=8000, reload=get_settings().is_development)
