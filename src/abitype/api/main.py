import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from abitype.api.types import router as types_router
from abitype.api.validate import router as validate_router
from abitype.container import Container

logger = logging.getLogger("abitype.api")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container
    if container.settings().debug:
        logging.getLogger("abitype").setLevel(logging.DEBUG)
    yield
    container.unwire()


app = FastAPI(title="abitype", version=VERSION, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(types_router)
app.include_router(validate_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}
