import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import structlog

from core.settings import Settings


SOURCE_URL = "https://names.example.com/api/archivos"
TARGET_URL = "https://results.example.com/api/resultados"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        source_url=SOURCE_URL,
        source_auth="Bearer source-token",
        target_url=TARGET_URL,
        target_auth="Bearer target-token",
        subject_name="Ada Lovelace",
        test_mode=False,
        http_timeout=5,
        pipeline_api_token="pipeline-secret",
    )


@pytest.fixture
def make_response():
    """Build a stand-in for requests.Response."""

    def _make(
        status_code: int = 200,
        json_data: Any = None,
        text: Optional[str] = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        response.text = text
        if json_data is not None:
            response.json.return_value = json_data
        else:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        return response

    return _make


@pytest.fixture
def name_records():
    return [{"NAME": "colin"}, {"NAME": " AMY "}, {"NAME": "bob3"}]
