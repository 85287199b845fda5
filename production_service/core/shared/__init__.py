from production_service.core.shared.logger import ColoredFormatter, JSONFormatter, configure_logging

__all__ = ["ColoredFormatter", "JSONFormatter", "configure_logging"]
