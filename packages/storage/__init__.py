from .stores import JsonFileStore, MemoryStore, Store
from .reconciler import STORAGE_SLOT, load, reconcile, save

__all__ = ["JsonFileStore", "MemoryStore", "Store", "STORAGE_SLOT", "load", "reconcile", "save"]
