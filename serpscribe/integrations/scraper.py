"""Reference page scraper for article refinement."""

import logging

import httpx
from bs4 import BeautifulSoup

from serpscribe.config import settings

logger = logging.getLogger(__name__)

NOISE_ELEMENTS = ["script", "style", "nav", "footer", "header", "aside", "form", "noscript"]


class WebsiteScraper:
    """Fetches a page and extracts its readable article text."""

    def __init__(
        self,
        timeout: float | None = None,
        max_content_chars: int | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.timeout = timeout or settings.scraper_timeout_seconds
        self.max_content_chars = max_content_chars or settings.scraper_max_content_chars
        self.user_agent = user_agent or settings.scraper_user_agent
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "WebsiteScraper":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *args) -> None:
        if self._client:
            await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Scraper must be used as async context manager")
        return self._client

    async def scrape_page(self, url: str) -> dict:
        """Scrape a single page and extract its main content.

        Returns:
            Dict with url, title, meta_description, headings, text_content,
            or url and error when the page could not be fetched.
        """
        logger.info("Scraping page", extra={"url": url})
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Failed to scrape page", extra={"url": url, "error": str(e)})
            return {"url": url, "error": str(e)}

        return self.extract_content(url, response.text)

    def extract_content(self, url: str, html: str) -> dict:
        soup = BeautifulSoup(html, "lxml")

        for element in soup(NOISE_ELEMENTS):
            element.decompose()

        title = soup.title.get_text(strip=True) if soup.title else ""
        meta_desc = ""
        meta_tag = soup.find("meta", attrs={"name": "description"})
        if meta_tag and meta_tag.get("content"):
            meta_desc = meta_tag["content"]

        headings = []
        for level in range(1, 4):
            for h in soup.find_all(f"h{level}"):
                text = h.get_text(strip=True)
                if text:
                    headings.append({"level": level, "text": text})

        # Prefer the article body over the whole page
        main_content = soup.find("article") or soup.find("main") or soup.body
        text_content = ""
        if main_content:
            text_content = main_content.get_text(separator="\n", strip=True)

        return {
            "url": url,
            "title": title,
            "meta_description": meta_desc,
            "headings": headings,
            "text_content": text_content[: self.max_content_chars],
        }
