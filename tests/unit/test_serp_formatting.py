"""Unit tests for SERP prompt formatting helpers."""

from __future__ import annotations

from serpscribe.schemas.serp import OrganicResult
from serpscribe.services.writing.serp_formatting import (
    format_ai_overview,
    format_keyword_report,
    format_organic_results,
    format_people_also_ask,
    format_related_queries,
)


def test_organic_results_are_numbered_blocks() -> None:
    text = format_organic_results(
        [
            {"position": 1, "title": "Best Running Shoes 2024", "url": "https://x.com", "description": "Top picks"},
            {"position": 2, "title": "Shoe Guide", "url": "https://y.com"},
        ]
    )

    assert text == (
        "1. Best Running Shoes 2024 (https://x.com)\n   Top picks\n\n"
        "2. Shoe Guide (https://y.com)"
    )


def test_organic_results_tolerate_bad_rows() -> None:
    text = format_organic_results(
        [None, {"url": "https://z.com"}, OrganicResult(position=3, title="Model row", url="https://m.com")]
    )

    assert text.splitlines()[0] == "1. (untitled) (https://z.com)"
    assert "2. Model row (https://m.com)" in text


def test_organic_results_respect_limit() -> None:
    rows = [{"title": f"Result {index}", "url": f"https://r{index}.com"} for index in range(30)]

    text = format_organic_results(rows, limit=3)

    assert text.count("\n\n") == 2
    assert "Result 3" not in text


def test_empty_inputs_render_empty() -> None:
    assert format_organic_results(None) == ""
    assert format_people_also_ask(None) == ""
    assert format_related_queries([]) == ""
    assert format_ai_overview(None) == ""


def test_people_also_ask_and_related_queries() -> None:
    assert format_people_also_ask(["How long do shoes last?", {"question": "Are they washable?"}, ""]) == (
        "- How long do shoes last?\n- Are they washable?"
    )
    assert format_related_queries(["trail shoes", {"query": "insoles"}, None]) == "trail shoes, insoles"


def test_ai_overview_text_or_object() -> None:
    assert format_ai_overview("  Plain overview ") == "Plain overview"
    assert format_ai_overview({"content": "Object overview"}) == "Object overview"


def test_keyword_report_ignores_empty_report() -> None:
    assert format_keyword_report(None) == ""
    assert format_keyword_report({}) == ""
    assert format_keyword_report("not a report") == ""


def test_keyword_report_marks_target_cluster() -> None:
    report = {
        "query": "running shoes",
        "language": "zh-TW",
        "region": "hk",
        "clustersWithVolume": [
            {
                "clusterName": "Trail",
                "totalVolume": 1500,
                "keywords": [
                    {"text": "trail running shoes", "searchVolume": 1400},
                    {"text": "trail shoe grip", "searchVolume": 40},
                ],
            },
            {
                "clusterName": "Road",
                "totalVolume": 900,
                "keywords": [{"text": "road running shoes", "searchVolume": 900}],
            },
        ],
        "updatedAt": "2024-05-01",
    }

    text = format_keyword_report(report, selected_cluster_name="Trail")

    assert "**Cluster 1: Trail** [TARGET CLUSTER] (Volume: 1,500)" in text
    assert "**Cluster 2: Road** (Volume: 900)" in text
    assert "Total Volume from Clusters: 2,400" in text
    assert "trail running shoes (Vol: 1,400)" in text
    assert "Low Volume Related Topics (< 100)" in text
    assert "  - trail shoe grip" in text
    assert "Report Updated: 2024-05-01" in text


def test_keyword_report_without_clusters_lists_keywords() -> None:
    report = {
        "query": "insoles",
        "keywords": [
            {"text": "insoles", "searchVolume": 300},
            {"text": "gel insoles", "searchVolume": 500},
        ],
    }

    text = format_keyword_report(report)

    assert "Total Volume from Keywords: 800" in text
    assert text.index("gel insoles") < text.index("insoles (Vol: 300)")
    assert "Region: N/A" in text


def test_keyword_report_tolerates_malformed_fields() -> None:
    report = {
        "query": "running shoes",
        "clustersWithVolume": [
            {"clusterName": "Trail", "totalVolume": "1200", "keywords": 7},
            {
                "clusterName": "Road",
                "totalVolume": 300,
                "keywords": [None, "loose", {"text": "road shoes", "searchVolume": "many"}],
            },
            "not a cluster",
        ],
    }

    text = format_keyword_report(report, selected_cluster_name="Trail")

    assert "**Cluster 1: Trail** [TARGET CLUSTER] (Volume: N/A)" in text
    assert "Total Volume from Clusters: 300" in text
    assert "Keywords: No specific keywords found." in text
    assert "**Cluster 3: not a cluster** (Volume: N/A)" in text
    assert "Low Volume Related Topics" not in text


def test_keyword_report_ignores_non_list_keywords() -> None:
    text = format_keyword_report({"query": "insoles", "keywords": {"text": "insoles"}})

    assert "No specific keyword data available." in text
