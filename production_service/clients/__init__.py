from production_service.clients.microservice_client import (
    MicroserviceClient,
    MicroserviceCommunicationError,
    MicroserviceError,
    MicroserviceNotFoundError,
    MicroserviceUpstreamError,
)

__all__ = [
    "MicroserviceClient",
    "MicroserviceError",
    "MicroserviceNotFoundError",
    "MicroserviceUpstreamError",
    "MicroserviceCommunicationError",
]
