"""Plain-text renderings of SERP data for analysis prompts.

Collection elements arrive unvalidated from callers, so every accessor
tolerates missing keys, ``None`` entries and non-dict rows.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from serpscribe.config import settings

NOT_PROVIDED = "N/A"
LOW_VOLUME_THRESHOLD = 100
LOW_VOLUME_FILTER_TRIGGER = 60
LOW_VOLUME_MAX_TOPICS = 100


def _field(item: Any, name: str) -> Any:
    if isinstance(item, BaseModel):
        return getattr(item, name, None)
    if isinstance(item, Mapping):
        return item.get(name)
    return None


def _as_text(item: Any, *keys: str) -> str:
    if item is None:
        return ""
    if isinstance(item, str):
        return item.strip()
    for key in keys:
        value = _field(item, key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def format_organic_results(
    organic_results: Sequence[Any] | None,
    limit: int | None = None,
) -> str:
    """Render the top organic results as numbered title/url/description blocks."""
    if not organic_results:
        return ""
    limit = limit or settings.serp_analysis_organic_results_limit

    blocks: list[str] = []
    for item in organic_results:
        if item is None:
            continue
        title = _as_text(item, "title") or "(untitled)"
        url = _as_text(item, "url", "link")
        description = _as_text(item, "description", "snippet")
        line = f"{len(blocks) + 1}. {title}"
        if url:
            line += f" ({url})"
        if description:
            line += f"\n   {description}"
        blocks.append(line)
        if len(blocks) >= limit:
            break
    return "\n\n".join(blocks)


def format_people_also_ask(people_also_ask: Sequence[Any] | None) -> str:
    questions = [_as_text(item, "question", "title") for item in people_also_ask or []]
    return "\n".join(f"- {question}" for question in questions if question)


def format_related_queries(related_queries: Sequence[Any] | None) -> str:
    queries = [_as_text(item, "query", "keyword", "text") for item in related_queries or []]
    return ", ".join(query for query in queries if query)


def format_ai_overview(ai_overview: Any) -> str:
    """AI overview may be plain text or a ``{"content": ...}`` object."""
    return _as_text(ai_overview, "content", "text")


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value


def _format_number(value: Any) -> str:
    number = _number(value)
    return NOT_PROVIDED if number is None else f"{number:,.0f}"


def _volume(keyword: Any) -> float | None:
    return _number(_field(keyword, "searchVolume"))


def _keyword_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _format_high_volume(keywords: Any) -> str:
    keywords = _keyword_list(keywords)
    if not keywords:
        return "No specific keywords found."
    high_volume = [
        keyword
        for keyword in keywords
        if (_volume(keyword) or 0) >= LOW_VOLUME_THRESHOLD
    ]
    if not high_volume:
        return f"No specific keywords found (Volume >= {LOW_VOLUME_THRESHOLD})."
    high_volume.sort(key=lambda keyword: _volume(keyword) or 0, reverse=True)
    lines = [
        f"{_as_text(keyword, 'text') or NOT_PROVIDED} (Vol: {_format_number(_volume(keyword))})"
        for keyword in high_volume
    ]
    return "\n      - " + "\n      - ".join(lines)


def _collect_low_volume(report: Mapping[str, Any]) -> list[tuple[str, float]]:
    clusters = report.get("clustersWithVolume")
    if isinstance(clusters, list):
        groups = [_keyword_list(_field(cluster, "keywords")) for cluster in clusters]
    else:
        groups = [_keyword_list(report.get("keywords"))]

    seen: dict[str, float] = {}
    for keywords in groups:
        for keyword in keywords:
            text = _as_text(keyword, "text")
            volume = _volume(keyword)
            if text and volume is not None and volume < LOW_VOLUME_THRESHOLD:
                seen.setdefault(text, volume)

    topics = list(seen.items())
    if len(topics) > LOW_VOLUME_FILTER_TRIGGER:
        topics = [topic for topic in topics if topic[1] != 0][:LOW_VOLUME_MAX_TOPICS]
    topics.sort(key=lambda topic: topic[1], reverse=True)
    return topics


def format_keyword_report(report: Any, selected_cluster_name: str | None = None) -> str:
    """Summarise a keyword research report for the action-plan prompt.

    Returns an empty string when there is no usable report. The selected
    cluster, when named, is marked as the target.
    """
    if not isinstance(report, Mapping) or not report:
        return ""

    lines = [
        "- **Keyword Research Report**:",
        f"  - Main Query: {report.get('query') or NOT_PROVIDED}",
        f"  - Language: {report.get('language') or NOT_PROVIDED}",
        f"  - Region: {report.get('region') or NOT_PROVIDED}",
    ]

    clusters = report.get("clustersWithVolume")
    keywords = report.get("keywords")
    if isinstance(clusters, list) and clusters:
        total = sum(_number(_field(cluster, "totalVolume")) or 0 for cluster in clusters)
        lines.append("  - **Clusters**:")
        lines.append(f"  - Total Volume from Clusters: {_format_number(total)}")
        for index, cluster in enumerate(clusters, start=1):
            name = _as_text(cluster, "clusterName") or f"Cluster {index}"
            marker = " [TARGET CLUSTER]" if selected_cluster_name == name else ""
            volume = _format_number(_field(cluster, "totalVolume"))
            lines.append(f"    - **Cluster {index}: {name}**{marker} (Volume: {volume})")
            lines.append(f"      - Keywords: {_format_high_volume(_field(cluster, 'keywords'))}")
    elif isinstance(keywords, list) and keywords:
        total = sum(_volume(keyword) or 0 for keyword in keywords)
        lines.append(f"  - Total Volume from Keywords: {_format_number(total)}")
        lines.append("  - **Keywords** (no specific clusters):")
        lines.append(f"    - {_format_high_volume(keywords)}")
    else:
        lines.append("  - Keywords: No specific keyword data available.")

    low_volume = _collect_low_volume(report)
    if low_volume:
        lines.append("")
        lines.append(f"- **Low Volume Related Topics (< {LOW_VOLUME_THRESHOLD}):**")
        lines.append(
            "  - Related topics with lower search volume that may matter to specific "
            "audiences. Consider covering some of them as short paragraphs or "
            "supplementary sections."
        )
        lines.append("  - Topic References:")
        lines.extend(f"  - {text}" for text, _ in low_volume)

    lines.append("")
    lines.append(f"  - Report Updated: {report.get('updatedAt') or NOT_PROVIDED}")
    return "\n".join(lines) + "\n"
