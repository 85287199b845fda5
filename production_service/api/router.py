from fastapi import APIRouter

from production_service.domains.production.api import orders_router, production_router

api_router = APIRouter()

api_router.include_router(orders_router)
api_router.include_router(production_router)
