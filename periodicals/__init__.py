"""
Periodical Registry

In-memory, position-addressable containers for journals and the
scientific articles they publish.
"""
__version__ = "0.1.0"
