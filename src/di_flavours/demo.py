"""Walk through the three dependency-injection flavours.

Usage:
    python -m di_flavours.demo

    # More detail, including the worker thread processing the data:
    DI_FLAVOURS_LOG_LEVEL=DEBUG python -m di_flavours.demo
"""

from __future__ import annotations

from loguru import logger

from di_flavours.collaborators import InMemoryFileManager, Worker
from di_flavours.config import Settings, get_settings
from di_flavours.initializer import FileLoader
from di_flavours.logging_config import setup_logging
from di_flavours.parameter import DataService
from di_flavours.property_injection import NetworkService
from di_flavours.queues import DispatchQueue

# ---------------------------------------------------------------------------
# Initializer injection
# ---------------------------------------------------------------------------


def demo_initializer_injection() -> FileLoader:
    file_manager = InMemoryFileManager({"greeting.txt": b"hello"})
    file_loader = FileLoader(file_manager=file_manager)
    logger.info("FileLoader loaded greeting.txt: {!r}", file_loader.load("greeting.txt"))
    return file_loader


# ---------------------------------------------------------------------------
# Property injection
# ---------------------------------------------------------------------------


def demo_property_injection() -> NetworkService:
    worker = Worker()
    network_service = NetworkService()
    network_service.delegate = worker
    logger.info("NetworkService delegate: {!r}", network_service.delegate)

    network_service.delegate = None
    logger.info("NetworkService delegate after clearing: {!r}", network_service.delegate)
    return network_service


# ---------------------------------------------------------------------------
# Parameter injection
# ---------------------------------------------------------------------------


def demo_parameter_injection(settings: Settings) -> None:
    data_service = DataService()
    with DispatchQueue(settings.queue_label, max_workers=settings.queue_max_workers) as queue:
        data_service.perform_task(b"some data", queue)
        logger.info("DataService submitted its task to {!r} and returned", queue)


def main() -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, json=settings.log_json)

    demo_initializer_injection()
    demo_property_injection()
    demo_parameter_injection(settings)


if __name__ == "__main__":
    main()
