import logging

from fastapi import FastAPI

from mdblog.routers import feeds, posts
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="mdblog API", description="Markdown blog content and SEO feeds")

app.include_router(posts.router)
app.include_router(feeds.router)


@app.get("/")
async def root():
    return {"message": "mdblog API is running"}
