import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard import __version__
from taskboard.config.settings import settings
from taskboard.database import get_store
from taskboard.routers import graphql
from taskboard.utils.exceptions import ErrorCode, InputValidationError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=__version__)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route registration
app.include_router(graphql.router)


# Malformed request bodies never reach the dispatcher
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = InputValidationError(
        "Malformed GraphQL request",
        [{"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]} for e in exc.errors()],
    )
    return JSONResponse(status_code=400, content={"errors": [error.to_dict()]})


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"errors": [{"message": "Internal server error", "extensions": {"code": ErrorCode.INTERNAL_ERROR.value}}]},
    )


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the seed data before the first request"""
    logger.info("Starting Taskboard GraphQL API...")
    get_store()


# Root route
@app.get("/")
def read_root():
    return {"message": settings.APP_NAME, "graphql": "/graphql"}


@app.get("/health")
def health():
    return {"status": "ok"}
