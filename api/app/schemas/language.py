from pydantic import BaseModel, ConfigDict, Field


class LanguageNameResponse(BaseModel):
    """Resolved language name response schema."""
    model_config = ConfigDict(populate_by_name=True)

    language_code: str = Field(alias="languageCode")
    language_name: str = Field(alias="languageName")
