from fastapi import APIRouter

from app.api.routers import cohorts, navigation, roles, users

api_router = APIRouter()

api_router.include_router(roles.router)
api_router.include_router(users.router)
api_router.include_router(cohorts.router)
api_router.include_router(navigation.router)
