"""
Pocket API integration.

This module provides direct integration with the Pocket API:
- OAuth request/access token exchange
- Paginated item retrieval with incremental sync
- Statistics and JSON export of fetched items
"""

from .auth import AccessTokenResponse, AuthSession, PocketAuth, build_authorization_url
from .client import PocketClient
from .errors import MalformedResponseError, MissingRequestTokenError, PocketAPIError, TransportError
from .pagination import PAGE_SIZE
from .pocket import PocketAPI, build_pocket_api
from .processor import PocketProcessor

__all__ = [
    'AccessTokenResponse',
    'AuthSession',
    'MalformedResponseError',
    'MissingRequestTokenError',
    'PAGE_SIZE',
    'PocketAPI',
    'PocketAPIError',
    'PocketAuth',
    'PocketClient',
    'PocketProcessor',
    'TransportError',
    'build_authorization_url',
    'build_pocket_api',
]
