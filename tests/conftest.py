# tests/conftest.py
import io
import json
import os
import zipfile

import pytest
from dotenv import load_dotenv

from leapwire.config import BaseApiSettings
from leapwire.dataforseo import DataForSEOSettings

# Load environment variables from .env file if it exists
# Useful for storing API credentials locally for testing
load_dotenv()


@pytest.fixture(scope="session")
def dataforseo_credentials() -> tuple[str | None, str | None]:
    """Fixture to provide DataForSEO credentials from environment variables."""
    return os.getenv("DATAFORSEO_LOGIN"), os.getenv("DATAFORSEO_PASSWORD")


@pytest.fixture
def fast_settings() -> BaseApiSettings:
    """Base settings with zero backoff so retry tests do not sleep."""
    return BaseApiSettings(max_attempts=3, backoff_multiplier=0.0)


@pytest.fixture
def dataforseo_settings() -> DataForSEOSettings:
    return DataForSEOSettings(
        login="test_login", password="test_password", backoff_multiplier=0.0
    )


def _make_envelope(
    result=None,
    *,
    status_code: int = 20000,
    status_message: str = "Ok.",
    task_status_code: int = 20000,
    task_status_message: str = "Ok.",
    task_id: str = "task-1",
    with_task: bool = True,
) -> dict:
    """Builds a DataForSEO response envelope around ``result``."""
    tasks = []
    if with_task:
        tasks.append(
            {
                "id": task_id,
                "status_code": task_status_code,
                "status_message": task_status_message,
                "time": "0.1 sec.",
                "cost": 0.01,
                "result_count": len(result) if isinstance(result, list) else 0,
                "path": ["v3"],
                "data": {"api": "test"},
                "result": result,
            }
        )
    return {
        "version": "0.1.20240801",
        "status_code": status_code,
        "status_message": status_message,
        "time": "0.2 sec.",
        "cost": 0.01,
        "tasks_count": len(tasks),
        "tasks_error": 0,
        "tasks": tasks,
    }


def _make_h5p_archive(
    files: dict[str, bytes | str | dict], *, manifest: dict | None = None
) -> bytes:
    """Builds an in-memory .h5p archive. Dict values are written as JSON."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        if manifest is not None:
            archive.writestr("h5p.json", json.dumps(manifest))
        for name, content in files.items():
            if isinstance(content, dict):
                content = json.dumps(content)
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_envelope():
    """Factory fixture for DataForSEO response envelopes."""
    return _make_envelope


@pytest.fixture
def make_h5p_archive():
    """Factory fixture for in-memory .h5p archives."""
    return _make_h5p_archive
