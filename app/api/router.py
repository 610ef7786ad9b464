from fastapi import APIRouter

from api.routes.system import router as system_router
from modules.greetings import router as greetings_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(greetings_router)
