"""
Data models for parsed property files.
"""
from .delimiter import Delimiter
from .line import Line
from .property_store import PropertyStore

__all__ = ["Delimiter", "Line", "PropertyStore"]
