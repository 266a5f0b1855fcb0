# roi_calculator/main.py

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load env before imports
load_dotenv()

from roi_calculator import __version__
from roi_calculator.config.settings import settings
from roi_calculator.api.routes import roi_router, assessment_router, assistant_router

logger = logging.getLogger("ROICalculator")


def configure_logging(level: str = settings.LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

# -----------------------------------------------------------------------------
# Application Configuration
# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="AI ROI Calculator",
        description="Task automation ROI estimator with LLM-assisted estimates and insights.",
        version=__version__
    )

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(roi_router)
    app.include_router(assessment_router)
    app.include_router(assistant_router)

    logger.info(f"AI ROI Calculator v{__version__} initialized")
    logger.info(f"LLM configured: {'Yes' if settings.llm_configured else 'No'} ({settings.LLM_MODEL})")

    return app

app = create_app()

# -----------------------------------------------------------------------------
# Entry Point
# -----------------------------------------------------------------------------

def main():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
