import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .database import Base, engine
from .routers import appointments as appointments_router
from .routers import auth as auth_router
from .routers import doctors as doctors_router
from .routers import drugs as drugs_router
from .routers import patients as patients_router
from .routers import transactions as transactions_router
from .routers import users as users_router

# --- Logging ---
logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("clinic-api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()


app = FastAPI(title="Clinic API", lifespan=lifespan)


# --- Exception Handlers ---

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed JSON or a field of the wrong type; the database is never reached
    log.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request payload"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # catch-all so no stack trace reaches the client
    log.exception("Unhandled error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root():
    return "Hello, Clinic API!"


# --- Routers ---
app.include_router(users_router.router)
app.include_router(appointments_router.router)
app.include_router(drugs_router.router)
app.include_router(auth_router.router)
app.include_router(patients_router.router)
app.include_router(doctors_router.router)
app.include_router(transactions_router.router)


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
