# ruff: noqa: E402
import os
import re

import pytest

# Point the app at an in-memory store before importing the app or settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GOOGLE_GEMINI_API_KEY"] = ""
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, select

from app.core.database import engine
from app.main import app
from app.models.language import LanguageEntry
from app.services.inference_service import get_inference_service

_CODE_IN_PROMPT = re.compile(r'language code: "([^"]*)"')


class FakeInference:
    """Inference stand-in that answers from a fixed table and records each call."""

    def __init__(self, names=None, error=None):
        self.names = names or {}
        self.error = error
        self.codes = []

    def complete(self, prompt: str) -> str:
        code = _CODE_IN_PROMPT.search(prompt).group(1)
        self.codes.append(code)
        if self.error is not None:
            raise self.error
        # Surround with whitespace the way models often do
        return f"  {self.names.get(code, 'Unknown')}\n"


@pytest.fixture(autouse=True)
def reset_schema():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def session():
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def inference():
    return FakeInference(names={
        "de": "German",
        "en-US": "English (United States)",
        "zh-CN": "Chinese (Simplified, China)",
        "fr": "French",
    })


@pytest.fixture
def client(inference):
    app.dependency_overrides[get_inference_service] = lambda: inference
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store_entry():
    """Seed the languages table outside of any request."""
    def _store(language_code: str, language_name: str) -> None:
        with Session(engine) as db_session:
            db_session.add(LanguageEntry(language_code=language_code, language_name=language_name))
            db_session.commit()
    return _store


@pytest.fixture
def stored_names():
    """Read back the languages table as a code -> name dict."""
    def _read() -> dict:
        with Session(engine) as db_session:
            entries = db_session.exec(select(LanguageEntry)).all()
            return {e.language_code: e.language_name for e in entries}
    return _read
