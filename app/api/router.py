from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.messages import router as messages_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(messages_router, prefix="/api/v1")
