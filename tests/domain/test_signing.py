"""Tests for signed URL generation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from urllib.parse import parse_qsl, urlsplit

import pytest

from ass_client.common.errors import AssErrorKind, UrlDoesNotMatchAccountError
from ass_client.domain.account import Account
from ass_client.domain.signing import access_token, sign_url, url_belongs_to

TOKEN = "6ea029fcb85dd473116edbc80a500b99ef7f8c32dacbca51bf2be622a38ab6c9"


class TestSignUrl:
    def test_sign_url(self, account):
        url = account.sign_url("http://url.com/name/image/2")

        assert url == f"http://url.com/name/image/2?accessToken={TOKEN}"

    def test_module_function_matches_method(self, account):
        assert sign_url(account, "http://url.com/name/image/2") == account.sign_url(
            "http://url.com/name/image/2"
        )

    def test_is_deterministic(self, account):
        first = account.sign_url("http://url.com/name/image/2")
        second = account.sign_url("http://url.com/name/image/2")

        assert first == second

    def test_concurrent_calls_agree(self, account):
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = set(
                pool.map(
                    lambda _: account.sign_url("http://url.com/name/image/2"), range(32)
                )
            )

        assert results == {f"http://url.com/name/image/2?accessToken={TOKEN}"}

    def test_rejects_url_without_account_name(self, account):
        with pytest.raises(UrlDoesNotMatchAccountError) as excinfo:
            account.sign_url("http://url.com/foobar/images/")

        assert excinfo.value.kind is AssErrorKind.URL_DOES_NOT_MATCH_ACCOUNT
        assert excinfo.value.url == "http://url.com/foobar/images/"

    def test_rejects_url_from_other_host(self, account):
        with pytest.raises(UrlDoesNotMatchAccountError) as excinfo:
            account.sign_url("http://other/unrelated")

        assert excinfo.value.url == "http://other/unrelated"

    def test_containment_is_textual(self, account):
        # "http://url" is a prefix of "http://url.com" and "name" appears in the path.
        assert url_belongs_to(account, "http://url.com/name/image/2")
        assert not url_belongs_to(account, "https://url.com/name/image/2")

    def test_preserves_existing_query(self):
        account = Account.create("https://storage.example.com", "acme", "secret")
        target = "https://storage.example.com/users/acme/files/a.pdf?download=1&x=a+b"

        signed = account.sign_url(target)

        query = urlsplit(signed).query
        assert query.startswith("download=1&x=a+b&accessToken=")
        assert parse_qsl(query)[-1] == ("accessToken", access_token("secret", target))

    def test_unencoded_input_is_signed_as_given(self, account):
        target = "http://url.com/name/my file.pdf"

        signed = account.sign_url(target)

        assert signed == (
            "http://url.com/name/my%20file.pdf"
            f"?accessToken={access_token('apikey', target)}"
        )

    def test_token_depends_on_key(self):
        first = Account.create("http://url", "name", "key-one")
        second = Account.create("http://url", "name", "key-two")

        assert first.sign_url("http://url/name/1") != second.sign_url("http://url/name/1")


class TestAccessToken:
    def test_known_vector(self):
        assert (
            access_token("apikey", "http://url.com/")
            == "4fdc092b5d6a5fe805ed029cbb0dfc30a1d0fdc141a099a1e70bf49e81c8d4e3"
        )

    def test_path_vector(self):
        assert access_token("apikey", "http://url.com/name/image/2") == TOKEN

    def test_is_lower_case_hex(self):
        token = access_token("k", "http://url")

        assert len(token) == 64
        assert token == token.lower()
        int(token, 16)
