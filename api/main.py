import logging
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from articles import router as articles_router
from associations import router as associations_router
from bookmarks import router as bookmarks_router
from categories import router as categories_router
from comments import router as comments_router
from completed_articles import router as completed_articles_router
from core import db, settings
from followed_packages import router as followed_packages_router
from packages import router as packages_router
from users import router as users_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router.router, prefix="/api", tags=["users"])
app.include_router(bookmarks_router.router, prefix="/api", tags=["bookmarks"])
app.include_router(completed_articles_router.router, prefix="/api", tags=["completed articles"])
app.include_router(followed_packages_router.router, prefix="/api", tags=["followed packages"])
app.include_router(articles_router.router, prefix="/api", tags=["articles"])
app.include_router(packages_router.router, prefix="/api", tags=["packages"])
app.include_router(categories_router.router, prefix="/api", tags=["categories"])
app.include_router(comments_router.router, prefix="/api", tags=["comments"])
app.include_router(associations_router.router, prefix="/api", tags=["associations"])


@app.exception_handler(asyncpg.PostgresError)
@app.exception_handler(asyncpg.InterfaceError)
async def storage_fault_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never echo SQL or driver messages to the client.
    logger.exception("storage_fault method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "content platform api"}
