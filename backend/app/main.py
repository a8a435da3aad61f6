from contextlib import asynccontextmanager
from typing import Any, Dict
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import preferences
from app.core.config import get_allowed_origins
from app.core.database import create_db_and_tables
from app.core.logging_config import setup_logging
from app.schemas.analysis_models import AnalysisRequest
from app.services.analyzer_service import TextAnalyzer
from app.services.display_service import build_display


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_db_and_tables()
    yield


app = FastAPI(
    title="Live Text Analyzer API",
    description="API for live text statistics, letter density and UI preferences.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(preferences.router)

analyzer_service = TextAnalyzer()


@app.get("/")
def read_root() -> Dict[str, str]:
    """Root endpoint to check API status.

    Returns:
        Dict[str, str]: Status message and link to docs.
    """
    return {"status": "API is ready", "docs": "/docs"}


@app.post("/analyze")
def analyze_endpoint(request: AnalysisRequest) -> Dict[str, Any]:
    """Analyzes a block of text.

    Computes counts, reading time, the soft limit flag and letter density,
    then formats them for display. The text itself is not stored.

    Args:
        request (AnalysisRequest): The text and analysis settings. An invalid
            character_limit means no limit rather than an error.

    Returns:
        Dict[str, Any]: The raw metrics and their display form.
    """
    metrics = analyzer_service.analyze(request.text, request.to_config())
    display = build_display(metrics)

    return {
        "metrics": metrics.model_dump(mode="json"),
        "display": display.model_dump(mode="json"),
    }
