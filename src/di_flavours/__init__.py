"""Three flavours of dependency injection, side by side.

- Initializer injection: ``FileLoader`` receives its ``FileManager`` when built.
- Property injection: ``NetworkService`` gets an optional, weakly held delegate.
- Parameter injection: ``DataService`` is handed its queue on every call.
"""

from di_flavours.collaborators import InMemoryFileManager, Worker
from di_flavours.exceptions import DIFlavoursError, SchedulingError
from di_flavours.initializer import FileLoader
from di_flavours.parameter import DataService
from di_flavours.property_injection import NetworkService
from di_flavours.protocols import FileManager, NetworkServiceDelegate, TaskQueue
from di_flavours.queues import DispatchQueue

__all__ = [
    "DIFlavoursError",
    "DataService",
    "DispatchQueue",
    "FileLoader",
    "FileManager",
    "InMemoryFileManager",
    "NetworkService",
    "NetworkServiceDelegate",
    "SchedulingError",
    "TaskQueue",
    "Worker",
]
