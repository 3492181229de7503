"""
Models package - imports all models so they register with SQLModel.
"""
from app.models.enums import ResponseType
from app.models.language import LanguageEntry

__all__ = [
    'ResponseType',
    'LanguageEntry',
]
