from __future__ import annotations

import json
import logging

from serpscribe.config import Settings
from serpscribe.core.logging import (
    JSONExtrasFormatter,
    StageContextFilter,
    current_log_context,
    log_context,
)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="serpscribe.services.writing.base_stage",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Stage started",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extras_as_json() -> None:
    line = JSONExtrasFormatter().format(_record(stage="title analysis", keyword="跑鞋"))

    prefix, _, extras = line.partition("Stage started ")
    assert "| INFO     | serpscribe.services.writing.base_stage |" in prefix
    assert json.loads(extras) == {"stage": "title analysis", "keyword": "跑鞋"}


def test_formatter_without_extras_is_plain() -> None:
    line = JSONExtrasFormatter().format(_record())

    assert line.endswith("| Stage started")


def test_stage_context_tags_records_without_overriding_extras() -> None:
    tagged = _record()
    explicit = _record(keyword="trail shoes")

    with log_context(stage="title analysis", keyword="running shoes"):
        assert StageContextFilter().filter(tagged)
        assert StageContextFilter().filter(explicit)

    assert tagged.stage == "title analysis"
    assert tagged.keyword == "running shoes"
    assert explicit.stage == "title analysis"
    assert explicit.keyword == "trail shoes"


def test_log_context_nests_and_resets() -> None:
    with log_context(stage="article generation"):
        with log_context(target_url="https://example.com"):
            assert current_log_context() == {
                "stage": "article generation",
                "target_url": "https://example.com",
            }
        assert current_log_context() == {"stage": "article generation"}

    assert current_log_context() == {}
    line = JSONExtrasFormatter().format(_record())
    assert line.endswith("| Stage started")


def test_database_url_is_normalised_to_asyncpg() -> None:
    assert (
        Settings(database_url="postgres://u:p@db:5432/app").database_url
        == "postgresql+asyncpg://u:p@db:5432/app"
    )
    assert (
        Settings(database_url="postgresql+psycopg2://u:p@db/app").database_url
        == "postgresql+asyncpg://u:p@db/app"
    )


def test_cors_origins_accept_json_or_comma_list() -> None:
    assert Settings(cors_origins='["https://a.com", "https://b.com"]').cors_origins == [
        "https://a.com",
        "https://b.com",
    ]
    assert Settings(cors_origins="https://a.com, https://b.com").cors_origins == [
        "https://a.com",
        "https://b.com",
    ]
    assert Settings(cors_origins="").cors_origins == []


def test_writing_limits_defaults() -> None:
    fresh = Settings()

    assert fresh.serp_analysis_organic_results_limit == 15
    assert fresh.persona_max_keywords == 80
