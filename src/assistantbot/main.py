import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

import uvicorn
from fastapi import FastAPI

from assistantbot.dependencies import get_app_state
from assistantbot.routes import directives
from assistantbot.routes import messages

logging.basicConfig(level=logging.INFO)


logger: Final = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
    app_state: Final = get_app_state()
    logger.info("Assistant is ready")
    try:
        yield
    finally:
        await app_state.aclose()
        logger.info("Released conversation history and LLM client")


app: Final = FastAPI(lifespan=lifespan)
app.include_router(directives.router)
app.include_router(messages.router)


def run() -> None:
    uvicorn.run(app)


if __name__ == "__main__":
    run()
