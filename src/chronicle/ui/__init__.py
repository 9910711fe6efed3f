"""
User interface components for Chronicle.
"""

from .cli import ChronicleCLI
from .display import DisplayManager

__all__ = [
    'ChronicleCLI',
    'DisplayManager'
]
