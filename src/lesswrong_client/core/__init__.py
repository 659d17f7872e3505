"""Core configuration and utilities."""

from .config import LessWrongConfig
from .constants import Constants
from .validators import FieldValidator

__all__ = ['LessWrongConfig', 'Constants', 'FieldValidator']
