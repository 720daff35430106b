from fastapi import APIRouter

from app.api.v1.routes_articles import router as articles_router
from app.api.v1.routes_auth import router as auth_router
from app.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(articles_router, prefix="/articles", tags=["articles"])
