#!/usr/bin/env python3
"""
HTTP transport for the Pocket API.

Every Pocket call is a form-encoded POST returning a text body, so the rest
of the client depends only on a callable of shape ``(url, fields) -> str``.
Tests substitute a fake with the same signature.
"""

import logging
from typing import Callable, Mapping, Optional

import requests

from ..config import get_timeout
from .errors import TransportError

logger = logging.getLogger(__name__)

DoHTTPRequest = Callable[[str, Mapping[str, Optional[str]]], str]

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def encode_fields(body):
    """Drop unset fields and stringify the rest."""
    return {key: str(value) for key, value in body.items() if value is not None}


def do_request(url: str, body: Mapping[str, Optional[str]], timeout: Optional[float] = None) -> str:
    """POST form fields to a Pocket endpoint and return the response text."""
    data = encode_fields(body)
    timeout = timeout if timeout is not None else get_timeout()

    try:
        response = requests.post(url, data=data, headers=FORM_HEADERS, timeout=timeout, verify=True)
    except requests.RequestException as e:
        raise TransportError(f"Network error calling {url}: {e}") from e

    if response.status_code != 200:
        x_error = response.headers.get("X-Error")
        logger.debug("Pocket returned HTTP %s for %s (X-Error: %s)", response.status_code, url, x_error)
        if response.status_code == 401:
            message = "Authentication failed. Token may be expired. Try re-authenticating."
        elif response.status_code == 403:
            message = "Access forbidden. Check your consumer key and permissions."
        else:
            message = f"Request to {url} failed with status {response.status_code}"
        if x_error:
            message = f"{message} ({x_error})"
        raise TransportError(message, status_code=response.status_code, x_error=x_error)

    return response.text
