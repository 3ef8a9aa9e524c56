"""
Single entry point bundling Pocket authorization and item retrieval.
"""

import time

from .. import config
from ..utils.console_utils import notify
from .auth import AuthSession, PocketAuth, build_authorization_url
from .client import PocketClient
from .transport import DoHTTPRequest, do_request


class PocketAPI:
    """Authorization flow plus item fetching sharing one transport.

    Each instance owns its own ``AuthSession``, so two instances can run
    independent authorization flows.
    """

    def __init__(self, consumer_key=None, do_request: DoHTTPRequest = do_request,
                 notifier=notify, clock=time.time):
        consumer_key = consumer_key or config.get_consumer_key()
        self.session = AuthSession()
        self.auth = PocketAuth(consumer_key, do_request=do_request)
        self.client = PocketClient(consumer_key, do_request=do_request, notifier=notifier, clock=clock)

    @property
    def consumer_key(self):
        return self.auth.consumer_key

    def get_request_token(self, auth_redirect_uri):
        return self.auth.get_request_token(auth_redirect_uri, self.session)

    def get_access_token(self):
        return self.auth.get_access_token(self.session)

    def get_pocket_items(self, access_token, last_update_timestamp=None, sync_tag=None):
        return self.client.get_pocket_items(access_token, last_update_timestamp, sync_tag)

    @staticmethod
    def build_authorization_url(request_token, auth_redirect_uri):
        return build_authorization_url(request_token, auth_redirect_uri)


def build_pocket_api(**kwargs):
    return PocketAPI(**kwargs)
