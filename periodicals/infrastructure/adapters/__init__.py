"""
Container adapters implementing the domain Container port.
"""
from .entity_container import EntityContainer

__all__ = ["EntityContainer"]
