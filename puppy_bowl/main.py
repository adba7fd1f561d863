import logging

import httpx
import uvicorn
from fastapi import FastAPI

from puppy_bowl.config import (
    API_URL,
    APP_HOST,
    APP_PORT,
    APP_TITLE,
    HTTP_TIMEOUT,
    LOG_LEVEL,
    TEAM_ID_POOL,
)
from puppy_bowl.facades.puppy_bowl_api import make_puppy_bowl_facade
from puppy_bowl.middlewares.logging import LoggingMiddleware, RequestIdFilter
from puppy_bowl.routers.roster import make_roster_router
from puppy_bowl.services.roster import make_roster_service

logger = logging.getLogger("puppy_bowl")
logger.setLevel(LOG_LEVEL)
handler = logging.StreamHandler()
handler.addFilter(RequestIdFilter())
formatter = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
)
handler.setFormatter(formatter)
logger.addHandler(handler)


async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        api = make_puppy_bowl_facade(client, API_URL)
        app.state.roster_service = make_roster_service(api, TEAM_ID_POOL)
        logger.info(f"Puppy Bowl app ready | API: {API_URL}")
        try:
            yield
        finally:
            app.state.roster_service = None


app = FastAPI(title=APP_TITLE, lifespan=lifespan)
app.add_middleware(LoggingMiddleware)
app.include_router(make_roster_router())


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, reload=False)
