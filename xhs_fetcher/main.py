# xhs_fetcher/main.py
import logging

from fastapi import FastAPI, Body, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .errors import ExtractionError, GENERIC_FAILURE_MESSAGE, INVALID_LINK_MESSAGE
from .logging_setup import configure_logging
from .models import FetchIn, NoteOut, ErrorOut
from .pipeline import extract_note

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="XHS Note Fetcher")

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error handlers ---

@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_LINK_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_FAILURE_MESSAGE},
    )

# --- Routes ---

@app.get("/health")
def health():
    return {"ok": True, "reader": settings.READER_BASE_URL}


@app.post(
    "/api/fetch-xhs",
    response_model=NoteOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def fetch_xhs(payload: FetchIn = Body(...)):
    """
    Pull a note out of pasted share text:
    - finds the xhslink / xiaohongshu link in the input
    - fetches its text rendering through the reader proxy
    - returns title, body text and note images
    """
    note = extract_note(payload.url)
    return note.to_dict()
