# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request, status
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.cache import open_redis
from controller.controller_dependencies import build_link_service
from fastapi.responses import JSONResponse, PlainTextResponse
from repository.bookmark_repository import BookmarkRepository
from repository.store import KeyValueStore
from util.constants import InternalURIs
from util.errors import CommandExecutionError, SerializationError, StoreError
from util.logger import init_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    try:
        init_logger()
        print(f"{Color.GREEN}Initializing...{Color.RESET}")
        store = KeyValueStore(await open_redis(settings.REDIS_URL))
        if settings.SEED_DEFAULT_BOOKMARKS and await store.is_empty():
            await BookmarkRepository(store).ensure_defaults()
        fastApi.state.store = store
        fastApi.state.link_service = build_link_service(store)
        print(f"{Color.BLUE}Server Started{Color.RESET}")
    except Exception as e:
        print("Failed to open store:", e)
        raise

    try:
        yield
    finally:
        try:
            await store.close()
        except StoreError as e:
            print("Error closing store:", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept"],
)


@app.get(InternalURIs.HEALTHZ)
async def healthz():
    return {"ok": True}


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("store.failure path=%s err=%s", request.url.path, exc)
    return JSONResponse(
        status_code=ErrorMessage.STORE_ERROR.value.http_status,
        content={
            "ok": False,
            "error": "store_error",
            "message": ErrorMessage.STORE_ERROR.value.message,
        },
    )


@app.exception_handler(SerializationError)
async def serialization_error_handler(request: Request, exc: SerializationError):
    logger.error("record.corrupt path=%s err=%s", request.url.path, exc)
    return JSONResponse(
        status_code=ErrorMessage.CORRUPT_RECORD.value.http_status,
        content={
            "ok": False,
            "error": "corrupt_record",
            "message": ErrorMessage.CORRUPT_RECORD.value.message,
        },
    )


@app.exception_handler(CommandExecutionError)
async def command_error_handler(request: Request, exc: CommandExecutionError):
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
