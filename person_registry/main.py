import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .crud import insert_person
from .database import Base, engine
from .routers import persons as persons_router
from .schemas import PersonIn

logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("person-registry")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()


app = FastAPI(title="Person Registry", lifespan=lifespan)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request payload"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(persons_router.router)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Person registry REST API")
    parser.add_argument("--id", default="", help="ID of a person to add before serving")
    parser.add_argument("--name", default="", help="Full name of the person")
    parser.add_argument("--age", type=int, default=0, help="Age of the person")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    return parser.parse_args(argv)


def startup_person(args: argparse.Namespace) -> Optional[PersonIn]:
    """The person to insert before serving, or None unless id, name and a positive age are all given."""
    if args.id and args.name and args.age > 0:
        return PersonIn(id=args.id, full_name=args.name, age=args.age)
    return None


def prepare(args: argparse.Namespace, bind=engine) -> None:
    """Pre-flight work done before the server listens.

    Creates missing tables when configured to, then performs the optional
    one-shot insert. Insert errors are raised to the caller.
    """
    if config.CREATE_TABLES:
        Base.metadata.create_all(bind=bind)

    person = startup_person(args)
    if person is None:
        return
    with Session(bind) as db:
        insert_person(db, person)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        prepare(args)
    except SQLAlchemyError as e:
        log.error("Error adding person: %s", e)
        return 1
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
