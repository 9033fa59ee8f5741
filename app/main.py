import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.db.session import init_db, dispose_db
from app.api.auth.routes import router as auth_router
from app.api.chat.routes import router as chat_router
from app.api.user.routes import router as user_router

from contextlib import asynccontextmanager

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield
    dispose_db()

app = FastAPI(title="AI Chatbot API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(chat_router, prefix="/api/chats", tags=["Chats"])
app.include_router(user_router, prefix="/api/user", tags=["User"])


# ---------------------------------------------------
# Errors: every failure body is {"error": "..."}
# ---------------------------------------------------

def validation_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    for error in errors:
        raised = (error.get("ctx") or {}).get("error")
        if raised:
            return str(raised)
    if any(error.get("type") == "missing" for error in errors):
        return "Please provide all required fields"
    if errors:
        error = errors[0]
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        return f"{field}: {error['msg']}" if field else error["msg"]
    return "Invalid request"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": validation_error_message(exc)})


# Only store failures are mapped here. Anything else is a bug and surfaces as
# Starlette's plain 500, outside the CORS middleware.
@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.get("/api/health")
def health():
    return {"message": "Server is running!"}
