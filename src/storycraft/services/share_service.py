"""
Story share links.

A shared story travels inside the link itself: the title and content are
serialized to JSON and URL-encoded into the ``shared`` query parameter, so
no storage is needed on either side.
"""

import json
import logging
from typing import Tuple
from urllib.parse import quote, urlparse, parse_qs

from src.storycraft.models import ShareLink
from src.storycraft.utils.errors import ValidationError

logger = logging.getLogger(__name__)

SHARE_QUERY_PARAM = "shared"
SHARE_INSTRUCTIONS = "📖 SCROLL DOWN TO SEE THE AMAZING STORY! 📖"

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


class StoryShareService:
    """Service for building and reading story share links."""

    def __init__(self, base_url: str):
        """
        Initialize share service.

        Args:
            base_url: Origin the share links point at (e.g. https://example.com)
        """
        self.base_url = base_url.rstrip("/")

    def generate_story_url(self, title: str, content: str) -> str:
        """
        Build a URL carrying the story.

        Args:
            title: Story title
            content: Story body text

        Returns:
            Share URL
        """
        payload = json.dumps(
            {"title": title, "content": content, "shared": True},
            ensure_ascii=False,
            separators=(",", ":"),
        )
        encoded = quote(payload, safe=_URI_COMPONENT_SAFE)
        return f"{self.base_url}/?{SHARE_QUERY_PARAM}={encoded}"

    def build_share_link(self, title: str, content: str) -> ShareLink:
        """
        Build the share URL and the message copied for the user.

        Args:
            title: Story title
            content: Story body text

        Returns:
            ShareLink with url and clipboard message
        """
        url = self.generate_story_url(title, content)
        logger.debug(f"Generated share link for '{title}' ({len(url)} chars)")
        return ShareLink(url=url, message=f"{url}\n\n{SHARE_INSTRUCTIONS}")

    def parse_shared_story(self, url: str) -> Tuple[str, str]:
        """
        Read the story back out of a share URL.

        Args:
            url: Share URL produced by generate_story_url

        Returns:
            Tuple of (title, content)

        Raises:
            ValidationError: If the URL carries no valid story payload
        """
        values = parse_qs(urlparse(url).query).get(SHARE_QUERY_PARAM)
        if not values:
            raise ValidationError(
                "Link does not contain a shared story.",
                details={"param": SHARE_QUERY_PARAM}
            )

        try:
            data = json.loads(values[0])
        except json.JSONDecodeError as e:
            raise ValidationError(
                "Shared story data is not valid JSON.",
                details={"param": SHARE_QUERY_PARAM, "reason": str(e)}
            ) from e

        if not isinstance(data, dict) or not data.get("shared"):
            raise ValidationError(
                "Shared story data is malformed.",
                details={"param": SHARE_QUERY_PARAM}
            )

        title = data.get("title")
        content = data.get("content")
        if not isinstance(title, str) or not isinstance(content, str):
            raise ValidationError(
                "Shared story is missing its title or content.",
                details={"param": SHARE_QUERY_PARAM}
            )
        return title, content
