"""
Concert Ticket Store - FastAPI Application

Run with: uvicorn src.service.concert_ticket.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Concert Ticket Store] Starting up...')

    di.setup()
    Logger.base.info(
        f'🗄️  [Concert Ticket Store] Storage backend: {container.config_service().STORAGE_BACKEND}'
    )

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Concert Ticket Store] Dependency injection wired')

    yield

    Logger.base.info('🛑 [Concert Ticket Store] Shutting down...')
    container.unwire()
    di.cleanup()


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
