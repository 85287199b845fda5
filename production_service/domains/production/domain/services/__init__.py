"""
Production Domain Services
"""

from production_service.domains.production.domain.services.production_scheduling import (
    ProductionInfo,
    ProductionSchedulingService,
)

__all__ = ["ProductionSchedulingService", "ProductionInfo"]
