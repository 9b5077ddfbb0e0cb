from .unit_of_work import UnitOfWork
from .client_snapshotter import ClientSnapshotter
from .document_number_generator import DocumentNumberGenerator
from .document_builder import DocumentBuilder

__all__ = [
    "UnitOfWork",
    "ClientSnapshotter",
    "DocumentNumberGenerator",
    "DocumentBuilder",
]
