"""Top-level API router — aggregates all endpoint routers under ``/api``."""

from fastapi import APIRouter

from blog_api.presentation.api.endpoints.articles import router as articles_router
from blog_api.presentation.api.endpoints.auth import router as auth_router
from blog_api.presentation.api.endpoints.health import router as health_router
from blog_api.presentation.api.endpoints.protected import router as protected_router
from blog_api.presentation.api.endpoints.users import router as users_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(articles_router)
router.include_router(protected_router)
