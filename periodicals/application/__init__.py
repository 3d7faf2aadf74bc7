"""Application layer: wiring of registry containers."""
from .registry import Registry, create_registry, load_sample_data

__all__ = ["Registry", "create_registry", "load_sample_data"]
