"""Social-media tools: post and read X (Twitter) content."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from mcp_servers.tools.arguments import optional, require
from mcp_servers.tools.registry import ToolRegistry, ToolSpec

if TYPE_CHECKING:
    from mcp_servers.clients.base import SocialFeed

_MAX_RESULTS_SCHEMA = {
    "type": "object",
    "properties": {
        "max_results": {
            "type": "integer",
            "description": "Max tweets to return (default 10)",
            "minimum": 1,
            "maximum": 100,
        },
    },
}


class XTool(str, Enum):
    TWEET = "tweet"
    GET_TIMELINE = "get_timeline"
    GET_MY_TWEETS = "get_my_tweets"


class XTools:
    """Tool handlers bound to a :class:`SocialFeed`."""

    def __init__(self, feed: SocialFeed) -> None:
        self._feed = feed

    async def tweet(self, arguments: dict[str, Any]) -> Any:
        return await self._feed.post(
            str(require(arguments, "text")), optional(arguments, "reply_to")
        )

    async def get_timeline(self, arguments: dict[str, Any]) -> Any:
        return await self._feed.get_timeline(int(optional(arguments, "max_results", 10)))

    async def get_my_tweets(self, arguments: dict[str, Any]) -> Any:
        return await self._feed.get_my_posts(int(optional(arguments, "max_results", 10)))


def build_x_registry(feed: SocialFeed) -> ToolRegistry:
    tools = XTools(feed)
    return ToolRegistry.from_enum(
        XTool,
        [
            ToolSpec(
                XTool.TWEET,
                "Post a tweet to Twitter/X. Use reply_to to reply to a specific tweet (thread).",
                {
                    "type": "object",
                    "properties": {
                        "text": {"type": "string", "description": "Tweet content (max 280 chars)"},
                        "reply_to": {
                            "type": "string",
                            "description": "Tweet ID to reply to (for threads)",
                        },
                    },
                    "required": ["text"],
                },
                tools.tweet,
            ),
            ToolSpec(
                XTool.GET_TIMELINE,
                "Get your home timeline",
                _MAX_RESULTS_SCHEMA,
                tools.get_timeline,
            ),
            ToolSpec(
                XTool.GET_MY_TWEETS,
                "Get your own tweets",
                _MAX_RESULTS_SCHEMA,
                tools.get_my_tweets,
            ),
        ],
    )
