import logging
import re

import httpx
from bs4 import BeautifulSoup

from group_directory.config import settings
from group_directory.schemas.metadata import MetadataRead

log = logging.getLogger("group_directory.metadata")

FALLBACK_NAMES = (
    "Study Group",
    "Friends Chat",
    "Business Network",
    "Community Hub",
    "Discussion Group",
    "Tech Talks",
    "Local Community",
    "Interest Group",
)

FALLBACK_IMAGES = (
    "https://images.unsplash.com/photo-1522071820081-009f0129c71c?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    "https://images.unsplash.com/photo-1600880292203-757bb62b4baf?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    "https://images.unsplash.com/photo-1523240795612-9a054b0db644?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    "https://images.unsplash.com/photo-1542751371-adc38448a05e?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
)

DEFAULT_TITLE = "Group Chat"
DEFAULT_IMAGE = FALLBACK_IMAGES[0]

_BRAND = re.compile("whatsapp", re.IGNORECASE)


class MetadataUnavailable(Exception):
    """The fetched page carried no title or image worth using."""


def group_code(url: str) -> str:
    return url.split("/")[-1]


def fallback_metadata(url: str) -> MetadataRead:
    """
    Derive a stable name and image from the link's last path segment.

    The hash is the plain sum of character codes. Changing it would move
    every existing link to a different name and image.
    """
    code_sum = sum(ord(char) for char in group_code(url))
    return MetadataRead(
        title=FALLBACK_NAMES[code_sum % len(FALLBACK_NAMES)],
        image_url=FALLBACK_IMAGES[code_sum % len(FALLBACK_IMAGES)],
    )


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str | None:
    tag = soup.find("meta", attrs=attrs)
    content = tag.get("content") if tag else None
    return content.strip() if isinstance(content, str) and content.strip() else None


def parse_metadata(html: str) -> MetadataRead:
    """Pull title and image from Open Graph, Twitter card or <title> tags."""
    soup = BeautifulSoup(html, "html.parser")

    page_title = (soup.title.get_text().strip() or None) if soup.title else None
    title = (
        _meta_content(soup, property="og:title")
        or _meta_content(soup, name="twitter:title")
        or page_title
    )
    image_url = _meta_content(soup, property="og:image") or _meta_content(
        soup, name="twitter:image"
    )
    if title is None and image_url is None:
        raise MetadataUnavailable("page has no title or image tags")

    title = _BRAND.sub("", title or "").strip() or DEFAULT_TITLE
    return MetadataRead(title=title, image_url=image_url or DEFAULT_IMAGE)


class MetadataService:
    """Best-effort title and image lookup for a group invite link."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._transport = transport
        self._timeout = timeout if timeout is not None else settings.metadata_timeout
        self._user_agent = user_agent or settings.metadata_user_agent

    async def _scrape(self, url: str) -> MetadataRead:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._timeout,
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
        return parse_metadata(response.text)

    async def extract(self, url: str) -> MetadataRead:
        """Scrape the invite page, falling back to a derived pair on any failure."""
        try:
            return await self._scrape(url)
        except Exception as exc:
            log.warning("Scraping %s failed, using fallback: %s", url, exc)
            return fallback_metadata(url)
