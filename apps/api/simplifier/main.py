import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from simplifier.api.router import api_router
from simplifier.core.config import get_settings
from simplifier.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.api_name,
    version=settings.api_version,
)

# CORS: allow local frontend dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Clients get the same {"error": ...} shape as every other failure.
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body."},
    )


# Include API router under /api
app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["system"])
async def health_check():
    """
    Simple health check endpoint to verify the API is running.
    """
    return {"status": "ok", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("simplifier.main:app", host="0.0.0.0", port=settings.api_port)
