import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from chama.api import activities, admins, dashboard, faqs, group_settings, loans, members, notes, personal_plan, reports, transactions
from chama.core.config import CORS_ORIGINS, LOG_LEVEL, SEED_DATA
from chama.database import create_db_and_tables, create_store_engine
from chama.utils.seed import seed_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    create_db_and_tables(engine)
    if app.state.seed:
        with Session(engine) as session:
            seed_store(session)
    yield
    engine.dispose()


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg", "Invalid request"))
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "Invalid request"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(database_url: Optional[str] = None, seed: Optional[bool] = None) -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL)

    app = FastAPI(title="Chama Ledger", lifespan=lifespan)
    # Each app owns its store; nothing is shared between instances
    app.state.engine = create_store_engine(database_url)
    app.state.seed = SEED_DATA if seed is None else seed

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(members.router)
    app.include_router(transactions.router)
    app.include_router(loans.router)
    app.include_router(personal_plan.router)
    app.include_router(admins.router)
    app.include_router(group_settings.router)
    app.include_router(faqs.router)
    app.include_router(notes.router)
    app.include_router(activities.router)
    app.include_router(reports.router)
    app.include_router(dashboard.router)

    @app.get("/")
    def root():
        return {"message": "Chama savings ledger"}

    return app


app = create_app()
