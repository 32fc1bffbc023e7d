"""Signed URLs for public retrieval.

A signed URL carries an ``accessToken`` query parameter holding the
lower-case hex HMAC-SHA256 of the unsigned URL, keyed by the account's API
key. Signing is deterministic: the same key and URL always give the same
token, so repeated calls never rotate links.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING

from ass_client.common.errors import UrlDoesNotMatchAccountError
from ass_client.common.urls import normalize_url, with_query

if TYPE_CHECKING:
    from ass_client.domain.account import Account

ACCESS_TOKEN_PARAM = "accessToken"


def access_token(api_key: str, url: str) -> str:
    """Return the hex HMAC-SHA256 of ``url`` keyed by ``api_key``."""
    digest = hmac.new(api_key.encode("utf-8"), url.encode("utf-8"), hashlib.sha256)
    return digest.hexdigest()


def url_belongs_to(account: "Account", url: str) -> bool:
    # Plain substring checks: account names embedded in the path must match.
    return account.base_url in url and account.name in url


def sign_url(account: "Account", url: str) -> str:
    """Append an ``accessToken`` for ``url`` signed with the account key.

    The token is computed over ``url`` as given; the returned URL is
    normalized and percent-encoded.

    Raises:
        UrlDoesNotMatchAccountError: If ``url`` does not contain the
            account's base URL and name.
    """
    if not url_belongs_to(account, url):
        raise UrlDoesNotMatchAccountError(url)
    token = access_token(account.api_key, url)
    return with_query(normalize_url(url), [(ACCESS_TOKEN_PARAM, token)])


__all__ = ["ACCESS_TOKEN_PARAM", "access_token", "sign_url", "url_belongs_to"]
