"""FastAPI application entry point."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from slowapi.errors import RateLimitExceeded

from api.logging_utils import get_logger, setup_logging
from api.rate_limit import RATE_LIMIT, limiter, rate_limit_exceeded_handler
from api.routes import pokdeng
from config import config
from core.validation import InvalidBatchError

setup_logging()
logger = get_logger("api")


async def _invalid_batch_handler(request: Request, exc: InvalidBatchError) -> JSONResponse:
    """Reject batches that cannot come from a single deck."""
    logger.warning("Rejected batch on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app = FastAPI(
    title="Pok Deng Advisor",
    description="Hit or stand recommendations for Pok Deng hands",
    version="0.1.0",
    debug=config.debug,
)

# Add rate limiter to app state and exception handlers
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(InvalidBatchError, _invalid_batch_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/", response_class=PlainTextResponse)
async def index() -> str:
    """Greeting."""
    return "Hello Pok Deng!"


@app.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> str:
    """Liveness probe."""
    return "OK"


@app.get("/api/health")
@limiter.limit(RATE_LIMIT)
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(pokdeng.router, prefix="/api/pokdeng", tags=["pokdeng"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=config.host, port=config.port, reload=config.debug)
