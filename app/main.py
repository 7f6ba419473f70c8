import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import async_session, create_collections
from app.exceptions import ObjectNotFoundError
from app.middleware import TimingMiddleware
from app.routers import posts, users
from app.services import seed_service

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    await create_collections()
    if settings.SEED_ON_STARTUP:
        async with async_session() as session:
            await seed_service.seed(session)
            await session.commit()
    logger.info("Workshop API started (env=%s)", settings.APP_ENV)
    yield

app = FastAPI(
    title="Workshop API - Users and Posts",
    description="CRUD over users and posts stored as documents",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Routers
app.include_router(users.router)
app.include_router(posts.router)

@app.exception_handler(ObjectNotFoundError)
async def handle_not_found(_: Request, exc: ObjectNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
