"""External collaborators — HTTP clients for the X and GitHub APIs."""

from mcp_servers.clients.base import IssueTracker, SocialFeed
from mcp_servers.clients.errors import ClientError, ConfigError, SigningError
from mcp_servers.clients.github import GitHubClient
from mcp_servers.clients.oauth1 import OAuth1Signer, OAuthCredentials
from mcp_servers.clients.x import XClient

__all__ = [
    "ClientError",
    "ConfigError",
    "GitHubClient",
    "IssueTracker",
    "OAuth1Signer",
    "OAuthCredentials",
    "SigningError",
    "SocialFeed",
    "XClient",
]
