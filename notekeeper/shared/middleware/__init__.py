from .request_logger import configure_request_logging

__all__ = ["configure_request_logging"]
