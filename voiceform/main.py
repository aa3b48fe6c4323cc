from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from voiceform.errors import WizardError
from voiceform.i18n import get_translator
from voiceform.routers.documents import router as documents_router
from voiceform.routers.form import router as form_router
from voiceform.settings import APP_VERSION, CORS_ALLOW_ORIGINS, LOG_LEVEL, SESSION_TTL_SECONDS
from voiceform.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL) # Init Logging
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Load the translation table once at startup so the first /api/start
    doesn't pay for it. A broken table leaves prompts in English.
    """
    get_translator()
    log.info("voice form assistant %s ready (session ttl=%ss)", APP_VERSION, SESSION_TTL_SECONDS)
    yield


app = FastAPI(title="Voice Form Assistant", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------
# Failure envelope: {"success": false, "error": <message>}
# --------------------------------------------------------------------
@app.exception_handler(WizardError)
async def wizard_error_handler(request: Request, exc: WizardError):
    return JSONResponse({"success": False, "error": exc.message}, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"success": False, "error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning("malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"success": False, "error": "Invalid request body"}, status_code=400)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse({"success": False, "error": "Internal server error"}, status_code=500)


# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/api/health")
def health():
    """Liveness probe."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": APP_VERSION,
    }


@app.get("/message", response_class=PlainTextResponse)
def message():
    return "Voice Form Assistant is running!"


# Register API routers:
app.include_router(form_router)
app.include_router(documents_router)
