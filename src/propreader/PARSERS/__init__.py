"""
Parsers for property files.
"""
from .property_file_reader import PropertyFileReader, count_trailing_backslashes

__all__ = ["PropertyFileReader", "count_trailing_backslashes"]
