import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import get_engine, get_session_factory, init_db
from app.routers import auth, bids, jobs

logger = logging.getLogger("app")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine(settings.database_url)
    init_db(engine)
    app.state.session_factory = get_session_factory(engine)
    logger.info("Store ready at %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()


app = FastAPI(
    title="SoloSphere",
    description="Freelance job marketplace: jobs, bids and session cookies",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    # Session cookies ride along on cross-origin requests from the web client
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(bids.router)


@app.get("/")
async def root():
    return "Hello from SoloSphere Server...."


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}
