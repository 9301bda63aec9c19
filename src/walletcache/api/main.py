import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from walletcache.api.wallets import router as wallets_router
from walletcache.container import Container
from walletcache.db.session import init_models

logger = logging.getLogger("walletcache.api")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container
    engine = container.engine()
    await init_models(engine)
    yield
    await engine.dispose()


app = FastAPI(title="WalletCache", version=VERSION, lifespan=lifespan)


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

app.include_router(wallets_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}
