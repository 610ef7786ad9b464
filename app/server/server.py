from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.exception_handlers import setup_exception_handlers
from api.router import api_router
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.request_context import RequestContextMiddleware

logger = get_module_logger()
settings = get_settings()


handler = FastAPI(title="Greetings", lifespan=lifespan)
setup_exception_handlers(handler)


allow_origins = ["*"] if settings.is_production else settings.server.CORS_ALLOW_ORIGINS
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
handler.add_middleware(RequestContextMiddleware)


handler.include_router(api_router)
