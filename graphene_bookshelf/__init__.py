from .store import Store
from .types import Relationship, StoreObjectType
from .utils import get_store

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Relationship",
    "Store",
    "StoreObjectType",
    "get_store",
]
