# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import config
from app.models import TicketStatus
from app.routers import tickets  # Tickets router

# -------------------------
# Logging
# -------------------------
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("GET", "/health", "Health check"),
    ("POST", "/tickets", "Create a new ticket"),
    ("GET", "/tickets", "List all tickets"),
    ("GET", "/tickets/{id}", "Get a specific ticket"),
    ("PATCH", "/tickets/{id}", "Update a specific ticket"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Ticket API...")
    logger.info("Available endpoints:")
    for method, path, summary in ENDPOINTS:
        logger.info(f"  {method:<6} {path:<16} - {summary}")
    logger.info("Ticket statuses: " + ", ".join(f"{s.value} ({s.label})" for s in TicketStatus))
    yield
    # Shutdown
    logger.info("Shutting down Ticket API...")


# -------------------------
# Initialize FastAPI App
# -------------------------
app = FastAPI(
    title="Ticket API",
    description="In-memory ticket management service",
    version="1.0.0",
    lifespan=lifespan
)

# -------------------------
# CORS
# -------------------------
# Credentials cannot be combined with a wildcard origin
allow_all = "*" in config.CORS_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else config.CORS_ORIGINS,
    allow_credentials=not allow_all,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------
# Error Handlers
# -------------------------
# Every error leaves the service as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and errors[0].get("type") == "json_invalid":
        message = "Invalid JSON body"
    elif errors:
        first = errors[0]
        # Skip the "body" root and positional offsets
        field = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body" and not isinstance(part, int)
        )
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


# -------------------------
# Health
# -------------------------
@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "ticket-api"}


# -------------------------
# Include Routers
# -------------------------
app.include_router(tickets.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=config.APP_HOST,
        port=config.APP_PORT,
        reload=config.APP_DEBUG
    )
