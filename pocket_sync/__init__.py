"""
Pocket Sync - a client for Pocket's OAuth flow and item retrieval API.

This package obtains Pocket request and access tokens and fetches a user's
saved items in pages, merging them into a single collection keyed by item id.
"""

__version__ = "1.0.0"
__author__ = "Pocket Sync Contributors"

from .api.auth import AccessTokenResponse, AuthSession, PocketAuth, build_authorization_url
from .api.client import PocketClient
from .api.errors import MalformedResponseError, MissingRequestTokenError, PocketAPIError, TransportError
from .api.pocket import PocketAPI, build_pocket_api

__all__ = [
    'AccessTokenResponse',
    'AuthSession',
    'MalformedResponseError',
    'MissingRequestTokenError',
    'PocketAPI',
    'PocketAPIError',
    'PocketAuth',
    'PocketClient',
    'TransportError',
    'build_authorization_url',
    'build_pocket_api',
]
