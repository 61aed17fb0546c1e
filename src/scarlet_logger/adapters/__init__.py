from .structlog_logger import StructlogLogger

__all__ = ["StructlogLogger"]
