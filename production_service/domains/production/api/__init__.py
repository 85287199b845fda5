from production_service.domains.production.api.routes import orders_router, production_router

__all__ = ["orders_router", "production_router"]
