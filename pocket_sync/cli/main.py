#!/usr/bin/env python3
"""
Pocket Sync - command-line host for the Pocket API client.
Runs the authorization flow and fetches saved items.
"""

import os
import sys
import webbrowser

from pocket_sync.api import PocketAPI, PocketAPIError, PocketProcessor
from pocket_sync.utils.console_utils import init_console, safe_print

DEFAULT_REDIRECT_URI = "pocketapp1234:authorizationFinished"


class PocketSyncCLI:
    def __init__(self, api=None, processor=None, open_browser=webbrowser.open, prompt=input):
        self.api = api or PocketAPI()
        self.processor = processor or PocketProcessor()
        self.open_browser = open_browser
        self.prompt = prompt

    def authorize(self, redirect_uri=DEFAULT_REDIRECT_URI, use_browser=True):
        """Run the request-token / access-token flow interactively."""
        safe_print("Starting Pocket API authentication...")
        safe_print("=" * 50)

        safe_print("Step 1: Getting request token...")
        request_token = self.api.get_request_token(redirect_uri)
        safe_print("✓ Request token obtained")

        safe_print("\nStep 2: User authorization...")
        auth_url = self.api.build_authorization_url(request_token, redirect_uri)
        safe_print(f"URL: {auth_url}")
        if use_browser:
            try:
                self.open_browser(auth_url)
            except webbrowser.Error as e:
                safe_print(f"Failed to open browser automatically: {e}")
                safe_print("Please manually open the URL above.")
        self.prompt("✅ Press Enter ONLY after you've completed authorization in your browser...")

        safe_print("\nStep 3: Getting access token...")
        result = self.api.get_access_token()
        safe_print(f"✓ Access token obtained for {result.username}")
        safe_print(f"\nAccess token: {result.access_token}")
        safe_print("Keep it somewhere safe; pass it with --access-token or POCKET_ACCESS_TOKEN.")
        return result

    def fetch(self, access_token, since=None, tag=None, save_raw=None):
        """Fetch items, print a summary and the next sync watermark."""
        safe_print("Fetching items from Pocket API")
        safe_print("=" * 50)

        result = self.api.get_pocket_items(access_token, since, tag)
        self.processor.print_summary(result, since)

        if save_raw is not None:
            self.processor.save_raw_json(result, save_raw or None)
        return result

    @staticmethod
    def show_help():
        """Show help information."""
        safe_print("""
Pocket Sync - Help

Usage: pocket-sync <command> [options]

Commands:
  auth [--redirect-uri URI] [--no-browser]
    Authorize this app with Pocket and print the access token

  fetch [--access-token TOKEN] [--since TIMESTAMP] [--tag TAG] [--save-raw [FILE]]
    Fetch saved items (incrementally when --since is given)

  help
    Show this help

Options:
  --verbose    Enable debug logging

Environment:
  POCKET_ACCESS_TOKEN    Access token used when --access-token is omitted
  POCKET_CONSUMER_KEY    Override the platform consumer key
  POCKET_SYNC_PLATFORM   mac, windows, linux, ios or android
  POCKET_SYNC_TIMEOUT    HTTP timeout in seconds
""")


def get_option(argv, name, default=None):
    """Value following --name in argv, or default when absent."""
    if name not in argv:
        return default
    idx = argv.index(name)
    if idx + 1 >= len(argv) or argv[idx + 1].startswith("--"):
        raise ValueError(f"Missing value for {name}")
    return argv[idx + 1]


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    init_console(verbose="--verbose" in argv)

    if not argv or argv[0] in ("help", "--help", "-h"):
        PocketSyncCLI.show_help()
        return 0

    command = argv[0]

    try:
        cli = PocketSyncCLI()

        if command == "auth":
            redirect_uri = get_option(argv, "--redirect-uri", DEFAULT_REDIRECT_URI)
            cli.authorize(redirect_uri, use_browser="--no-browser" not in argv)

        elif command == "fetch":
            access_token = get_option(argv, "--access-token") or os.getenv('POCKET_ACCESS_TOKEN')
            if not access_token:
                safe_print("ERROR: No access token. Run 'pocket-sync auth' first.")
                return 1

            since = get_option(argv, "--since")
            if since is not None:
                since = int(since)
            tag = get_option(argv, "--tag")

            save_raw = None
            if "--save-raw" in argv:
                idx = argv.index("--save-raw")
                following = argv[idx + 1] if idx + 1 < len(argv) else ""
                save_raw = "" if following.startswith("--") else following

            cli.fetch(access_token, since=since, tag=tag, save_raw=save_raw)

        else:
            safe_print(f"ERROR: Unknown command: {command}")
            cli.show_help()
            return 1

    except ValueError as e:
        safe_print(f"ERROR: {e}")
        return 1
    except PocketAPIError as e:
        safe_print(f"\n✗ {command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
