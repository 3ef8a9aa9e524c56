#!/usr/bin/env python3
"""
Pocket API client for retrieving saved items.
Handles paginated retrieval and incremental sync.
"""

import json
import logging
import time
from datetime import datetime

from .. import config
from ..utils.console_utils import notify
from .pagination import PAGE_SIZE, FetchState, PaginationState, advance, fail
from .transport import DoHTTPRequest, do_request

logger = logging.getLogger(__name__)

# Pocket API endpoint for retrieving items
GET_ITEMS_URL = "https://getpocket.com/v3/get"


def redact(request_options):
    """Copy of the request options safe to write to logs."""
    safe = dict(request_options)
    if safe.get("access_token"):
        safe["access_token"] = "***"
    return safe


def describe_timestamp(timestamp):
    """Local date for an epoch-seconds value, or the raw number when out of range."""
    try:
        return datetime.fromtimestamp(int(timestamp)).strftime('%Y-%m-%d %H:%M:%S')
    except (ValueError, OSError, OverflowError):
        return str(timestamp)


class PocketClient:
    def __init__(self, consumer_key=None, do_request: DoHTTPRequest = do_request,
                 notifier=notify, clock=time.time, page_size=PAGE_SIZE):
        """Initialize Pocket API client."""
        self.consumer_key = consumer_key or config.get_consumer_key()
        self.do_request = do_request
        self.notifier = notifier
        self.clock = clock
        self.page_size = page_size

    def build_request_options(self, access_token, offset, last_update_timestamp=None, sync_tag=None):
        return {
            "consumer_key": self.consumer_key,
            "access_token": access_token,
            "since": str(int(last_update_timestamp)) if last_update_timestamp else None,
            "detailType": "complete",
            "tag": sync_tag,
            "count": str(self.page_size),
            "offset": str(offset),
        }

    def get_pocket_items(self, access_token, last_update_timestamp=None, sync_tag=None):
        """
        Retrieve all items from Pocket using pagination.

        Args:
            access_token: Access token of the authorized user
            last_update_timestamp: Only return items updated since this epoch second
            sync_tag: Only return items carrying this tag

        Returns:
            Dict {"timestamp": next_timestamp, "response": {"status", "complete", "list"}}
            where timestamp is the watermark to pass as last_update_timestamp next time.
        """
        # Captured before fetching so items changed mid-fetch are picked up next sync
        next_timestamp = int(self.clock())
        pagination = PaginationState(page_size=self.page_size)

        while pagination.state is not FetchState.DONE:
            offset = pagination.offset
            request_options = self.build_request_options(
                access_token, offset, last_update_timestamp, sync_tag
            )
            logger.debug("Request options: %s", json.dumps(redact(request_options), indent=2))

            if last_update_timestamp and offset == 0:
                logger.info("Fetching with Pocket item updates since %s", describe_timestamp(last_update_timestamp))
            elif offset == 0:
                logger.info("Fetching all Pocket items")
            else:
                logger.info("Fetching Pocket items with offset %d", offset)

            try:
                response_body = self.do_request(GET_ITEMS_URL, request_options)
                pagination = advance(pagination, json.loads(response_body))
            except Exception as e:
                pagination = fail(pagination)
                error_message = f"Encountered error {e} while fetching Pocket items with offset {offset}"
                logger.error(error_message)
                self.notifier(error_message)
                raise

            if not pagination.last_batch:
                logger.warning("Response list is null or undefined.")
                continue

            logger.info(
                "Fetched %d items in this batch. Total items so far: %d.",
                pagination.last_batch, len(pagination.items),
            )
            if pagination.state is FetchState.DONE:
                logger.info("Fewer items returned than the limit. Finishing fetch loop.")

        logger.info("Fetched a total of %d Pocket items.", len(pagination.items))

        return {
            "timestamp": next_timestamp,
            "response": {
                "status": 0,
                "complete": 0,
                "list": pagination.items,
            },
        }
