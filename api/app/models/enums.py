"""
Model enums.
"""
from enum import Enum
from typing import Optional


class ResponseType(str, Enum):
    """Output format of the language name endpoint."""
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_query(cls, value: Optional[str]) -> "ResponseType":
        """Only an explicit 'text' selects plain text; anything else is JSON."""
        return cls.TEXT if value == cls.TEXT.value else cls.JSON
