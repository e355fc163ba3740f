"""
Suggestion Model
Pydantic model for an improvement suggestion with an optional illustrative example.
"""
from typing import Optional

from pydantic import BaseModel


class Example(BaseModel):
    before: str
    after: str


class Suggestion(BaseModel):
    message: str
    example: Optional[Example] = None
