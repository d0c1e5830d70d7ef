"""Unit tests for the writing pipeline API."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from serpscribe.agents.better_have import BetterHaveAnalysis, BetterHaveItem
from serpscribe.agents.title import TitleAnalysis
from serpscribe.core.database import get_session
from serpscribe.main import create_app
from serpscribe.schemas.writing import MISSING_OR_EMPTY_MESSAGE

BASE_PATH = "/api/v1/writing"
STAGES = "serpscribe.services.writing"

RUNNING_SHOES_RESULTS = [
    {
        "position": 1,
        "title": "Best Running Shoes 2024",
        "url": "https://x.com",
        "description": "...",
    }
]


class _FakeExecuteResult:
    def __init__(self, value: Any) -> None:
        self._value = value

    def scalar_one_or_none(self) -> Any:
        return self._value


class _FakeSession:
    def __init__(self, row: Any = None) -> None:
        self._row = row
        self.queries: list[Any] = []

    async def execute(self, query: Any) -> _FakeExecuteResult:
        self.queries.append(query)
        return _FakeExecuteResult(self._row)


def _agent_returning(output: Any = "ok", error: Exception | None = None) -> type:
    class _FakeAgent:
        calls: list[Any] = []

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            pass

        async def run(self, input_data: Any) -> Any:
            _FakeAgent.calls.append(input_data)
            if error is not None:
                raise error
            return output

    return _FakeAgent


def _streaming_agent(chunks: list[str], error: Exception | None = None) -> type:
    class _FakeStreamingAgent:
        calls: list[Any] = []

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            pass

        async def stream_text(self, input_data: Any) -> AsyncGenerator[str, None]:
            _FakeStreamingAgent.calls.append(input_data)
            for chunk in chunks:
                yield chunk
            if error is not None:
                raise error

    return _FakeStreamingAgent


def _client(session: _FakeSession | None = None) -> TestClient:
    app = create_app()
    fake_session = session or _FakeSession()

    async def _override_session() -> AsyncGenerator[_FakeSession, None]:
        yield fake_session

    app.dependency_overrides[get_session] = _override_session
    return TestClient(app)


def _serp_row(**overrides: Any) -> SimpleNamespace:
    values = {
        "id": "doc1",
        "original_keyword": "running shoes",
        "region": "hk",
        "language": "zh-TW",
        "organic_results": RUNNING_SHOES_RESULTS,
        "people_also_ask": ["Which running shoes last longest?"],
        "related_queries": ["trail running shoes"],
        "ai_overview": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _paths(response: Any) -> list[str]:
    return [item["path"] for item in response.json()["details"]]


@pytest.mark.parametrize(
    ("endpoint", "payload", "missing_path"),
    [
        ("/serp", {"mediaSiteName": "BF"}, "keyword"),
        ("/serp", {"keyword": "running shoes"}, "mediaSiteName"),
        ("/content-type", {}, "serpDocId"),
        ("/user-intent", {"keyword": "x"}, "serpDocId"),
        ("/user-intent", {"serpDocId": "doc1"}, "keyword"),
        ("/title", {"keyword": "running shoes"}, "serpDocId"),
        ("/title", {"serpDocId": "doc1"}, "keyword"),
        ("/better-have", {"serpDocId": "doc1"}, "keyword"),
        ("/action-plan", {"mediaSiteName": "BF"}, "keyword"),
        ("/action-plan", {"keyword": "running shoes"}, "mediaSiteName"),
        ("/final-prompt", {"keyword": "running shoes", "mediaSiteName": "BF"}, "actionPlan"),
        ("/personas", {}, "keywords"),
    ],
)
def test_missing_required_field_returns_400_with_field_path(
    endpoint: str,
    payload: dict[str, Any],
    missing_path: str,
) -> None:
    response = _client().post(f"{BASE_PATH}{endpoint}", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid input"
    assert missing_path in _paths(response)


def test_user_intent_rejects_empty_serp_doc_id() -> None:
    response = _client().post(
        f"{BASE_PATH}/user-intent",
        json={"serpDocId": "", "keyword": "x"},
    )

    assert response.status_code == 400
    details = response.json()["details"]
    assert {"path": "serpDocId", "message": MISSING_OR_EMPTY_MESSAGE} in details


def test_whitespace_only_keyword_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning("| Intent | ... |")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.UserIntentAnalyzerAgent", analyzer)

    response = _client().post(
        f"{BASE_PATH}/user-intent",
        json={"serpDocId": "doc1", "keyword": "   "},
    )

    assert response.status_code == 400
    assert _paths(response) == ["keyword"]
    assert analyzer.calls == []


def test_malformed_json_body_returns_400() -> None:
    response = _client().post(
        f"{BASE_PATH}/title",
        content=b'{"serpDocId": "doc1",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input"
    assert _paths(response) == ["body"]


def test_title_example_returns_analysis_and_recommendation(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    analysis = TitleAnalysis(
        title="Best Running Shoes 2024: Tested Picks",
        analysis="Titles lead with 'Best' and the year.",
        recommendations=["Include the year", "Lead with 'Best'"],
    )
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleAnalyzerAgent", _agent_returning(analysis))
    monkeypatch.setattr(
        f"{STAGES}.analysis_stages.TitleRecommenderAgent",
        _agent_returning("Recommended title: Best Running Shoes 2024 because: matches SERP"),
    )
    response = _client().post(
        f"{BASE_PATH}/title",
        json={
            "serpDocId": "doc1",
            "keyword": "running shoes",
            "organicResults": RUNNING_SHOES_RESULTS,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"analysisJson", "recommendationText"}
    assert set(body["analysisJson"]) == {"title", "analysis", "recommendations"}
    assert body["recommendationText"]


def test_repeated_title_request_keeps_analysis_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    analyses = iter(
        [
            TitleAnalysis(title="Best Running Shoes 2024", analysis="Years win.", recommendations=[]),
            TitleAnalysis(
                title="Running Shoes Tested",
                analysis="Lists win.",
                recommendations=["Use a number"],
            ),
        ]
    )

    class _VaryingAnalyzer:
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            pass

        async def run(self, input_data: Any) -> TitleAnalysis:
            return next(analyses)

    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleAnalyzerAgent", _VaryingAnalyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleRecommenderAgent", _agent_returning("r"))
    client = _client()
    payload = {
        "serpDocId": "doc1",
        "keyword": "running shoes",
        "organicResults": RUNNING_SHOES_RESULTS,
    }

    first = client.post(f"{BASE_PATH}/title", json=payload)
    second = client.post(f"{BASE_PATH}/title", json=payload)

    assert first.status_code == second.status_code == 200
    assert first.json()["analysisJson"].keys() == second.json()["analysisJson"].keys()


def test_title_accepts_null_organic_results(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning(TitleAnalysis(title="t", analysis="a", recommendations=[]))
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleAnalyzerAgent", analyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleRecommenderAgent", _agent_returning("r"))
    client = _client()

    with_null = client.post(
        f"{BASE_PATH}/title",
        json={"serpDocId": "doc1", "keyword": "running shoes", "organicResults": None},
    )
    absent = client.post(
        f"{BASE_PATH}/title",
        json={"serpDocId": "doc1", "keyword": "running shoes"},
    )

    assert with_null.status_code == absent.status_code == 200
    assert analyzer.calls[0] == analyzer.calls[1]
    assert analyzer.calls[0].serp_results == ""


def test_title_analyzer_receives_formatted_serp(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning(TitleAnalysis(title="t", analysis="a", recommendations=[]))
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleAnalyzerAgent", analyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.TitleRecommenderAgent", _agent_returning("r"))

    response = _client().post(
        f"{BASE_PATH}/title",
        json={"serpDocId": "doc1", "keyword": "running shoes", "organicResults": RUNNING_SHOES_RESULTS},
    )

    assert response.status_code == 200
    serp_text = analyzer.calls[0].serp_results
    assert serp_text.startswith("1. Best Running Shoes 2024 (https://x.com)")


def test_stage_failure_returns_500_envelope(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        f"{STAGES}.analysis_stages.TitleAnalyzerAgent",
        _agent_returning(error=RuntimeError("upstream timeout")),
    )

    response = _client().post(
        f"{BASE_PATH}/title",
        json={"serpDocId": "doc1", "keyword": "running shoes"},
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed during title analysis step",
        "details": "upstream timeout",
    }


def test_content_type_unknown_document_returns_404(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning("| Content Type | Pages |")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeAnalyzerAgent", analyzer)

    response = _client(_FakeSession(row=None)).post(
        f"{BASE_PATH}/content-type",
        json={"serpDocId": "missing-doc"},
    )

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "SERP document not found"
    assert "missing-doc" in body["details"]
    assert analyzer.calls == []


def test_content_type_resolves_document_by_id(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning("| Content Type | Pages |\n| List posts (1) | 1 |")
    recommender = _agent_returning("Write a List post because: it dominates the SERP.")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeAnalyzerAgent", analyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeRecommenderAgent", recommender)

    response = _client(_FakeSession(row=_serp_row())).post(
        f"{BASE_PATH}/content-type",
        json={"serpDocId": "doc1", "keyword": "ignored keyword"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "analysisText": "| Content Type | Pages |\n| List posts (1) | 1 |",
        "recommendationText": "Write a List post because: it dominates the SERP.",
    }
    assert analyzer.calls[0].keyword == "running shoes"
    assert recommender.calls[0].analysis_text.startswith("| Content Type")


def test_content_type_accepts_null_optionals(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning("| Content Type | Pages |")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeAnalyzerAgent", analyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeRecommenderAgent", _agent_returning("r"))

    response = _client(_FakeSession(row=_serp_row())).post(
        f"{BASE_PATH}/content-type",
        json={"serpDocId": "doc1", "keyword": None, "organicResults": None},
    )

    assert response.status_code == 200
    assert set(response.json()) == {"analysisText", "recommendationText"}
    assert analyzer.calls[0].serp_results.startswith("1. Best Running Shoes 2024")


def test_content_type_document_without_results_is_execution_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(f"{STAGES}.analysis_stages.ContentTypeAnalyzerAgent", _agent_returning("x"))

    response = _client(_FakeSession(row=_serp_row(organic_results=[]))).post(
        f"{BASE_PATH}/content-type",
        json={"serpDocId": "doc1"},
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Failed during content type analysis step"


def test_user_intent_accepts_null_optionals(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = _agent_returning("| Search Intent Category | Actual Intent | Pages |")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.UserIntentAnalyzerAgent", analyzer)

    response = _client().post(
        f"{BASE_PATH}/user-intent",
        json={"serpDocId": "doc1", "keyword": "running shoes", "organicResults": None, "relatedQueries": None},
    )

    assert response.status_code == 200
    assert response.json() == {"analysisText": "| Search Intent Category | Actual Intent | Pages |"}
    assert analyzer.calls[0].serp_results == ""
    assert analyzer.calls[0].related_queries == ""


def test_better_have_returns_items_and_recommendation(monkeypatch: pytest.MonkeyPatch) -> None:
    analysis = BetterHaveAnalysis(
        items=[
            BetterHaveItem(
                recommendation="Answer how long running shoes last",
                justification="Direct PAA question",
                source="people_also_ask",
            )
        ]
    )
    analyzer = _agent_returning(analysis)
    recommender = _agent_returning("Focus on durability questions from PAA.")
    monkeypatch.setattr(f"{STAGES}.analysis_stages.BetterHaveAnalyzerAgent", analyzer)
    monkeypatch.setattr(f"{STAGES}.analysis_stages.BetterHaveRecommenderAgent", recommender)

    response = _client().post(
        f"{BASE_PATH}/better-have",
        json={
            "serpDocId": "doc1",
            "keyword": "running shoes",
            "organicResults": None,
            "peopleAlsoAsk": ["How long do running shoes last?"],
            "relatedQueries": None,
            "aiOverview": {"content": "Replace shoes every 500 km."},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["analysisJson"]["items"][0]["source"] == "people_also_ask"
    assert body["recommendationText"] == "Focus on durability questions from PAA."
    assert analyzer.calls[0].people_also_ask == "- How long do running shoes last?"
    assert analyzer.calls[0].ai_overview == "Replace shoes every 500 km."
    assert "Answer how long running shoes last" in recommender.calls[0].analysis_text


def test_action_plan_without_reports_still_succeeds(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = _agent_returning("## Keyword Theme\nRunning gear\n## Action Plan\n- Review shoes")
    monkeypatch.setattr(f"{STAGES}.planning_stages.ActionPlanGeneratorAgent", generator)

    response = _client().post(
        f"{BASE_PATH}/action-plan",
        json={"keyword": "running shoes", "mediaSiteName": "BF"},
    )

    assert response.status_code == 200
    assert response.json()["actionPlanText"].startswith("## Keyword Theme")
    plan_input = generator.calls[0]
    assert plan_input.content_type_recommendation is None
    assert plan_input.better_have_recommendation is None
    assert "businessfocus.io" in plan_input.media_site_description


def test_action_plan_treats_null_reports_like_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = _agent_returning("## Action Plan\n- Compare models")
    monkeypatch.setattr(f"{STAGES}.planning_stages.ActionPlanGeneratorAgent", generator)
    client = _client()
    absent = {"keyword": "running shoes", "mediaSiteName": "GSSG"}
    explicit_null = {
        **absent,
        "contentTypeReportText": None,
        "userIntentReportText": None,
        "titleRecommendationText": None,
        "betterHaveRecommendationText": None,
        "keywordReport": None,
        "selectedClusterName": None,
    }

    first = client.post(f"{BASE_PATH}/action-plan", json=absent)
    second = client.post(f"{BASE_PATH}/action-plan", json=explicit_null)

    assert first.status_code == second.status_code == 200
    assert generator.calls[0] == generator.calls[1]


def test_action_plan_unknown_media_site_still_plans(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = _agent_returning("## Action Plan\n- Write it")
    monkeypatch.setattr(f"{STAGES}.planning_stages.ActionPlanGeneratorAgent", generator)

    response = _client().post(
        f"{BASE_PATH}/action-plan",
        json={"keyword": "running shoes", "mediaSiteName": "NOPE"},
    )

    assert response.status_code == 200
    assert '"name": "NOPE"' in generator.calls[0].media_site_description


def test_malformed_keyword_report_does_not_fail_planning(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = _agent_returning("## Action Plan\n- Cover trail shoes")
    monkeypatch.setattr(f"{STAGES}.planning_stages.ActionPlanGeneratorAgent", generator)
    client = _client()
    reports = [
        {"clustersWithVolume": [{"clusterName": "a", "totalVolume": "1200", "keywords": []}]},
        {"clustersWithVolume": [{"clusterName": "a", "totalVolume": 1200, "keywords": 7}]},
    ]

    for report in reports:
        plan = client.post(
            f"{BASE_PATH}/action-plan",
            json={"keyword": "running shoes", "mediaSiteName": "BF", "keywordReport": report},
        )
        prompt = client.post(
            f"{BASE_PATH}/final-prompt",
            json={
                "keyword": "running shoes",
                "mediaSiteName": "BF",
                "actionPlan": "## Action Plan",
                "keywordReport": report,
            },
        )

        assert plan.status_code == 200
        assert prompt.status_code == 200
    assert "**Cluster 1: a** (Volume: N/A)" in generator.calls[0].keyword_report


def test_action_plan_empty_output_is_execution_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(f"{STAGES}.planning_stages.ActionPlanGeneratorAgent", _agent_returning("  "))

    response = _client().post(
        f"{BASE_PATH}/action-plan",
        json={"keyword": "running shoes", "mediaSiteName": "BF"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed during action plan generation step"
    assert "empty" in body["details"]


def test_final_prompt_includes_plan_and_reports() -> None:
    response = _client().post(
        f"{BASE_PATH}/final-prompt",
        json={
            "keyword": "running shoes",
            "actionPlan": "## Action Plan\n- Compare cushioning",
            "mediaSiteName": "GSSG",
            "contentTypeReportText": "Write a List post",
            "userIntentReportText": None,
        },
    )

    assert response.status_code == 200
    prompt = response.json()["finalPrompt"]
    assert "## Action Plan\n- Compare cushioning" in prompt
    assert "Focus keyword: running shoes" in prompt
    assert "Write a List post" in prompt
    assert "girlstyle.com/sg" in prompt


def test_personas_caps_keywords_at_80(monkeypatch: pytest.MonkeyPatch) -> None:
    agent = _streaming_agent(['{"personas": ', "[]}"])
    monkeypatch.setattr(f"{STAGES}.generation_stages.PersonaGeneratorAgent", agent)
    keywords = [f"keyword {index}" for index in range(120)]

    response = _client().post(f"{BASE_PATH}/personas", json={"keywords": keywords})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert agent.calls[0].keywords == keywords[:80]
    assert 'data: {"text": "{\\"personas\\": "}' in response.text
    assert response.text.rstrip().endswith('event: done\ndata: {"chunks": 2}')


def test_personas_rejects_blank_keyword_list() -> None:
    response = _client().post(f"{BASE_PATH}/personas", json={"keywords": ["", "  "]})

    assert response.status_code == 400
    assert _paths(response) == ["keywords"]


def test_article_requires_plan_or_refinement_input(monkeypatch: pytest.MonkeyPatch) -> None:
    agent = _streaming_agent(["never"])
    monkeypatch.setattr(f"{STAGES}.generation_stages.ArticleWriterAgent", agent)

    response = _client().post(f"{BASE_PATH}/article", json={"keyword": "running shoes"})

    assert response.status_code == 400
    assert _paths(response) == ["actionPlan"]
    assert agent.calls == []


def test_article_rejects_non_http_target_url() -> None:
    response = _client().post(
        f"{BASE_PATH}/article",
        json={"targetUrl": "ftp://example.com/post"},
    )

    assert response.status_code == 400
    assert _paths(response) == ["targetUrl"]


def test_article_fresh_mode_streams_from_final_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    agent = _streaming_agent(["<h1>Running shoes</h1>", "<p>Body</p>"])
    monkeypatch.setattr(f"{STAGES}.generation_stages.ArticleWriterAgent", agent)

    response = _client().post(
        f"{BASE_PATH}/article",
        json={
            "keyword": "running shoes",
            "actionPlan": "## Action Plan\n- Compare cushioning",
            "mediaSiteName": "BF",
        },
    )

    assert response.status_code == 200
    assert "event: chunk" in response.text
    assert "event: done" in response.text
    assert "Compare cushioning" in agent.calls[0].final_prompt


def test_article_stream_failure_emits_error_event(monkeypatch: pytest.MonkeyPatch) -> None:
    agent = _streaming_agent(["partial "], error=RuntimeError("connection reset"))
    monkeypatch.setattr(f"{STAGES}.generation_stages.ArticleWriterAgent", agent)

    response = _client().post(
        f"{BASE_PATH}/article",
        json={"keyword": "running shoes", "actionPlan": "plan"},
    )

    assert response.status_code == 200
    assert 'data: {"text": "partial "}' in response.text
    assert "event: error" in response.text
    assert "connection reset" in response.text
    assert "event: done" not in response.text


def test_article_refinement_scrape_failure_returns_502(monkeypatch: pytest.MonkeyPatch) -> None:
    class _FailingScraper:
        async def __aenter__(self) -> "_FailingScraper":
            return self

        async def __aexit__(self, *args: Any) -> None:
            return None

        async def scrape_page(self, url: str) -> dict:
            return {"url": url, "error": "404 Not Found"}

    graph_agent = _agent_returning("## Graph Knowledge Visualization")
    monkeypatch.setattr(f"{STAGES}.generation_stages.WebsiteScraper", _FailingScraper)
    monkeypatch.setattr(f"{STAGES}.generation_stages.KnowledgeGraphAgent", graph_agent)

    response = _client().post(
        f"{BASE_PATH}/article",
        json={"inputText": "Draft", "targetUrl": "https://example.com/post"},
    )

    assert response.status_code == 502
    assert response.json() == {"error": "Reference page API error", "details": "404 Not Found"}
    assert graph_agent.calls == []


def test_article_refinement_uses_graph_from_reference(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Scraper:
        async def __aenter__(self) -> "_Scraper":
            return self

        async def __aexit__(self, *args: Any) -> None:
            return None

        async def scrape_page(self, url: str) -> dict:
            return {"url": url, "text_content": "Reference article body"}

    graph_agent = _agent_returning("[Shoes]──(type)──>【Trail】")
    refiner = _streaming_agent(["Refined article"])
    monkeypatch.setattr(f"{STAGES}.generation_stages.WebsiteScraper", _Scraper)
    monkeypatch.setattr(f"{STAGES}.generation_stages.KnowledgeGraphAgent", graph_agent)
    monkeypatch.setattr(f"{STAGES}.generation_stages.ArticleRefinerAgent", refiner)

    response = _client().post(
        f"{BASE_PATH}/article",
        json={"inputText": "My draft", "targetUrl": "https://example.com/post"},
    )

    assert response.status_code == 200
    assert graph_agent.calls[0].text == "Reference article body"
    assert refiner.calls[0].input_text == "My draft"
    assert refiner.calls[0].graph_text == "[Shoes]──(type)──>【Trail】"
    assert "Refined article" in response.text


def test_media_sites_lists_catalogue() -> None:
    response = _client().get(f"{BASE_PATH}/media-sites")

    assert response.status_code == 200
    items = response.json()["items"]
    names = [item["name"] for item in items]
    assert "BF" in names and "GSMY" in names
    assert {"name", "url", "title", "description", "language", "region"} <= set(items[0])


def test_health_check() -> None:
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
