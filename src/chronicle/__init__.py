"""
Chronicle - Song Catalog Tool.

Classifies song records into eras defined by album releases and groups them
into a browsable era / status / session tree.
"""

from .core.config import PROJECT_VERSION as __version__

__all__ = ['__version__']
