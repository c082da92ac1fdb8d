"""
Model for a single stored property value.
"""
from pydantic import BaseModel, Field


class Line(BaseModel):
    """
    A property value and the line number its key was defined on.
    The value may have been joined from several physical lines.
    """
    value: str = ""
    line_number: int = Field(..., ge=1)
