# Interfaces Package
from .application_store_port import ApplicationStorePort

__all__ = ["ApplicationStorePort"]
