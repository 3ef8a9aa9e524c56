#!/usr/bin/env python3
"""
Summaries and JSON export of a Pocket fetch result.

Incremental fetches (``since``) also return items removed on the server as
tombstones with status "2"; those are counted apart from live items.
"""

import json
from collections import Counter
from datetime import datetime

from ..utils.console_utils import safe_print

UNREAD, ARCHIVED, DELETED = "0", "1", "2"


class PocketProcessor:
    def format_timestamp(self, timestamp):
        """Convert Unix timestamp to readable datetime."""
        if timestamp and str(timestamp) != "0":
            try:
                return datetime.fromtimestamp(int(timestamp)).strftime('%Y-%m-%d %H:%M:%S')
            except (ValueError, OSError, OverflowError):
                return ""
        return ""

    def summarize(self, result, since=None):
        """Count what a fetch brought back.

        ``result`` is the ``{"timestamp", "response"}`` dict returned by
        ``PocketClient.get_pocket_items``.
        """
        items = result["response"].get("list") or {}
        statuses = Counter(str(item.get("status", UNREAD)) for item in items.values())
        live = [item for item in items.values() if str(item.get("status", UNREAD)) != DELETED]

        tags = Counter()
        for item in live:
            tags.update((item.get("tags") or {}).keys())

        return {
            "incremental": bool(since),
            "since": since,
            "next_since": result["timestamp"],
            "total": len(items),
            "unread": statuses[UNREAD],
            "archived": statuses[ARCHIVED],
            "deleted": statuses[DELETED],
            "favorites": sum(1 for item in live if str(item.get("favorite", "0")) == "1"),
            "top_tags": tags.most_common(5),
        }

    def print_summary(self, result, since=None):
        summary = self.summarize(result, since)

        if summary["incremental"]:
            safe_print(f"\nChanges since {self.format_timestamp(since) or since}")
        else:
            safe_print("\nFull sync")
        safe_print("=" * 50)

        if not summary["total"]:
            safe_print("No items found")
        else:
            safe_print(f"Items: {summary['total']} "
                       f"({summary['unread']} unread, {summary['archived']} archived)")
            if summary["deleted"]:
                safe_print(f"Deleted on Pocket: {summary['deleted']}")
            safe_print(f"Favorited: {summary['favorites']}")
            if summary["top_tags"]:
                safe_print("Top tags: " + ", ".join(f"{tag} ({count})" for tag, count in summary["top_tags"]))

        watermark = self.format_timestamp(summary["next_since"])
        safe_print(f"\nNext sync: --since {summary['next_since']} ({watermark})")
        return summary

    def save_raw_json(self, result, filename=None):
        """Write a fetch result to JSON, named after its sync watermark by default."""
        filename = filename or f"pocket_items_{result['timestamp']}.json"
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        safe_print(f"✓ Fetch result saved to {filename}")
        return filename
