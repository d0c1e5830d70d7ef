"""DataForSEO API integration for live SERP snapshots."""

import base64
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from serpscribe.config import settings
from serpscribe.core.exceptions import APIKeyMissingError, ExternalAPIError, RateLimitExceededError

logger = logging.getLogger(__name__)


class DataForSEOClient:
    """Client for the DataForSEO SERP API."""

    BASE_URL = "https://api.dataforseo.com/v3"

    def __init__(
        self,
        login: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.login = login or settings.dataforseo_login
        self.password = password or settings.dataforseo_password
        self.timeout = timeout or settings.dataforseo_timeout_seconds
        self._client: httpx.AsyncClient | None = None

        if not self.login or not self.password:
            raise APIKeyMissingError("DataForSEO")

    @property
    def _auth_header(self) -> str:
        """Generate Basic Auth header."""
        credentials = f"{self.login}:{self.password}"
        encoded = base64.b64encode(credentials.encode()).decode()
        return f"Basic {encoded}"

    async def __aenter__(self) -> "DataForSEOClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "Authorization": self._auth_header,
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client must be used as async context manager")
        return self._client

    async def _make_request(
        self,
        endpoint: str,
        data: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """Make a POST request to DataForSEO API."""
        logger.info("DataForSEO API request", extra={"endpoint": endpoint})
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            response = await self.client.post(url, json=data)

            if response.status_code == 429:
                logger.warning("DataForSEO rate limit hit", extra={"endpoint": endpoint})
                raise RateLimitExceededError("DataForSEO")

            response.raise_for_status()
            result = response.json()

            if result.get("status_code") != 20000:
                logger.warning(
                    "DataForSEO API error",
                    extra={"endpoint": endpoint, "status": result.get("status_message")},
                )
                raise ExternalAPIError(
                    "DataForSEO",
                    result.get("status_message", "Unknown error"),
                )

            tasks = result.get("tasks", [])
            results = []
            for task in tasks:
                if task.get("status_code") == 20000 and task.get("result"):
                    results.extend(task["result"])

            return results

        except httpx.HTTPError as e:
            logger.warning("DataForSEO HTTP error", extra={"endpoint": endpoint, "error": str(e)})
            raise ExternalAPIError("DataForSEO", str(e)) from e

    async def get_serp_results(
        self,
        keyword: str,
        location_code: int = 2344,
        language_code: str = "zh-TW",
        device: str = "desktop",
        depth: int | None = None,
    ) -> dict[str, Any]:
        """Get a SERP snapshot for a keyword.

        Args:
            keyword: Keyword to search
            location_code: DataForSEO location code
            language_code: Language code
            device: "desktop" or "mobile"
            depth: Number of results to return (max 100)

        Returns:
            Dict with organic results, People Also Ask questions, related
            searches, AI overview text and metadata
        """
        logger.info("Fetching SERP results", extra={"keyword": keyword, "device": device})
        data = [
            {
                "keyword": keyword,
                "location_code": location_code,
                "language_code": language_code,
                "device": device,
                "depth": depth or settings.serp_depth,
            }
        ]

        results = await self._make_request(
            "serp/google/organic/live/advanced",
            data,
        )

        if not results:
            return {
                "keyword": keyword,
                "organic_results": [],
                "people_also_ask": [],
                "related_queries": [],
                "ai_overview": None,
                "total_results": None,
                "provider_response_id": None,
                "fetched_at": datetime.now(timezone.utc).isoformat(),
            }

        return parse_serp_result(keyword, results[0])


def parse_serp_result(keyword: str, result: dict[str, Any]) -> dict[str, Any]:
    """Flatten one DataForSEO advanced SERP result."""
    organic_results = []
    people_also_ask: list[str] = []
    related_queries: list[str] = []
    ai_overview_parts: list[str] = []

    for item in result.get("items") or []:
        item_type = item.get("type")
        if item_type == "organic":
            if not item.get("title") or not item.get("url"):
                continue
            organic_results.append({
                "position": item.get("rank_absolute"),
                "title": item.get("title"),
                "url": item.get("url"),
                "description": item.get("description"),
                "domain": item.get("domain"),
                "breadcrumb": item.get("breadcrumb"),
            })
        elif item_type == "people_also_ask":
            for question in item.get("items") or []:
                title = question.get("title") if isinstance(question, dict) else None
                if title:
                    people_also_ask.append(title)
        elif item_type == "related_searches":
            related_queries.extend(query for query in item.get("items") or [] if query)
        elif item_type == "ai_overview":
            if item.get("markdown"):
                ai_overview_parts.append(item["markdown"])
            else:
                for element in item.get("items") or []:
                    text = element.get("text") if isinstance(element, dict) else None
                    if text:
                        ai_overview_parts.append(text)

    return {
        "keyword": keyword,
        "organic_results": organic_results,
        "people_also_ask": people_also_ask,
        "related_queries": related_queries,
        "ai_overview": "\n\n".join(ai_overview_parts) or None,
        "total_results": result.get("se_results_count"),
        "provider_response_id": result.get("id"),
        "fetched_at": datetime.now(timezone.utc).isoformat(),
    }


LOCATION_CODES = {
    "hk": 2344,
    "tw": 2158,
    "my": 2458,
    "sg": 2702,
    "us": 2840,
    "uk": 2826,
    "au": 2036,
    "ca": 2124,
}


def get_location_code(region: str) -> int:
    """Convert a region or locale string to a DataForSEO location code."""
    country = region.split("-")[-1].lower() if "-" in region else region.lower()
    return LOCATION_CODES.get(country, 2344)  # Default to Hong Kong
