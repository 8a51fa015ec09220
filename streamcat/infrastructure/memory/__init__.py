"""
Stockage en memoire (demo et tests).
"""

from streamcat.infrastructure.memory.storage import MemStorage

__all__ = ["MemStorage"]
