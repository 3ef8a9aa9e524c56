#!/usr/bin/env python3
"""
Pocket API OAuth authentication module.
Handles the request-token / access-token exchange of Pocket's OAuth flow.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs

from .. import config
from .errors import MalformedResponseError, MissingRequestTokenError
from .transport import DoHTTPRequest, do_request

logger = logging.getLogger(__name__)

# Pocket API endpoints
REQUEST_TOKEN_URL = "https://getpocket.com/v3/oauth/request"
AUTHORIZE_URL = "https://getpocket.com/auth/authorize"
ACCESS_TOKEN_URL = "https://getpocket.com/v3/oauth/authorize"


@dataclass
class AuthSession:
    """Holds the request token of one in-progress authorization."""

    request_token: Optional[str] = None

    @property
    def pending(self):
        return bool(self.request_token)

    def clear(self):
        self.request_token = None


@dataclass(frozen=True)
class AccessTokenResponse:
    access_token: str
    username: str


def build_authorization_url(request_token, auth_redirect_uri):
    """Format the browser-facing URL where the user grants access."""
    return f"{AUTHORIZE_URL}?request_token={request_token}&redirect_uri={auth_redirect_uri}"


def parse_form_response(body, *fields):
    """Extract required fields from a form-encoded response body."""
    parsed = parse_qs(body or "", keep_blank_values=True)
    values = []
    for field in fields:
        value = parsed.get(field, [""])[0]
        if not value:
            raise MalformedResponseError(field, body)
        values.append(value)
    return values


class PocketAuth:
    def __init__(self, consumer_key=None, do_request: DoHTTPRequest = do_request):
        """Initialize Pocket authentication."""
        self.consumer_key = consumer_key or config.get_consumer_key()
        self.do_request = do_request

    def get_request_token(self, auth_redirect_uri, session: AuthSession):
        """Get a request token from Pocket and store it on the session."""
        if session.pending:
            logger.warning("Found unexpected stored request token")

        body = self.do_request(REQUEST_TOKEN_URL, {
            "consumer_key": self.consumer_key,
            "redirect_uri": auth_redirect_uri,
        })

        try:
            request_token, = parse_form_response(body, "code")
        except MalformedResponseError:
            # The previous flow is abandoned either way
            session.clear()
            raise
        session.request_token = request_token
        logger.debug("Obtained Pocket request token")
        return request_token

    def get_access_token(self, session: AuthSession):
        """Exchange the session's request token for an access token."""
        if not session.pending:
            raise MissingRequestTokenError()

        body = self.do_request(ACCESS_TOKEN_URL, {
            "consumer_key": self.consumer_key,
            "code": session.request_token,
        })

        # Pocket codes are single-use once the exchange has answered
        session.clear()

        access_token, username = parse_form_response(body, "access_token", "username")
        logger.info("Obtained Pocket access token for %s", username)
        return AccessTokenResponse(access_token=access_token, username=username)
