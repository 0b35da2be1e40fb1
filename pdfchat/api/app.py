"""FastAPI host application.

The NiceGUI chat page is mounted onto this application; it only serves the
health route itself.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfchat import __version__

logger = logging.getLogger(__name__)

SERVICE_NAME = "pdf-chat"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log when the host process starts serving and when it stops."""
    logger.info(f"{app.title} {app.version} starting")
    yield
    logger.info(f"{app.title} stopped")


def create_app(cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the host application.

    Args:
        cors_origins: Origins allowed to call the health route from a browser.
                      Any origin by default.

    Returns:
        FastAPI application ready for ``ui.run_with``.
    """
    application = FastAPI(
        title="PDF Chat",
        description=(
            "Chat with Google Gemini, optionally sending text extracted from "
            "uploaded PDF documents along with your message."
        ),
        version=__version__,
        redoc_url=None,
        lifespan=lifespan,
    )
    # Read-only and credential-free
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["GET"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": SERVICE_NAME}

    return application


app = create_app()
