"""
Language model.
"""
from sqlmodel import SQLModel, Field
from datetime import datetime
from sqlalchemy import Column, DateTime, func


class LanguageEntry(SQLModel, table=True):
    """Languages table - caches the English name resolved for each language code."""
    __tablename__ = "languages"

    language_code: str = Field(primary_key=True)  # e.g., 'en', 'en-US', 'zh-CN' - stored exactly as received
    language_name: str  # English, English (United States), Chinese (Simplified, China), etc.
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False, server_default=func.now()),
    )  # Set at insertion, never updated
