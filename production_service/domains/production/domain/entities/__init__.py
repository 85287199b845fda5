from production_service.domains.production.domain.entities.order import Order
from production_service.domains.production.domain.entities.order_product import OrderProduct, OrderProductList

__all__ = ["Order", "OrderProduct", "OrderProductList"]
