"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from app.api.v1.endpoints import language

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(language.router)
