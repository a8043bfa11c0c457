import pytest
from requests.auth import HTTPBasicAuth
from requests_oauthlib import OAuth1

from restspec.auth import BasicAuth, NoAuth, OAuth1Auth, resolve_auth
from restspec.errors import AuthError

OAUTH = {
    "consumer_key": "ck",
    "consumer_secret": "c-secret",
    "token": "tk",
    "token_secret": "t-secret",
}


def test_basic_auth_builds_requests_auth():
    auth = BasicAuth({"user": "alice", "pass": "s3cret"}).requests_auth()

    assert isinstance(auth, HTTPBasicAuth)
    assert (auth.username, auth.password) == ("alice", "s3cret")


def test_oauth_builds_oauth1_signer():
    assert isinstance(OAuth1Auth(OAUTH).requests_auth(), OAuth1)


@pytest.mark.parametrize("factory, config, missing", [
    (BasicAuth, {"user": "alice"}, "pass"),
    (OAuth1Auth, {"consumer_key": "ck", "consumer_secret": "cs"}, "token, token_secret"),
])
def test_incomplete_credentials(factory, config, missing):
    with pytest.raises(AuthError, match=missing):
        factory(config)


def test_credentials_must_be_a_dict():
    with pytest.raises(AuthError):
        BasicAuth(("alice", "s3cret"))


def test_repr_hides_secrets():
    assert "s3cret" not in repr(BasicAuth({"user": "alice", "pass": "s3cret"}))
    assert "secret" not in repr(OAuth1Auth(OAUTH))


def test_resolve_auth_precedence():
    basic = BasicAuth({"user": "alice", "pass": "s3cret"})
    oauth = OAuth1Auth(OAUTH)

    assert isinstance(resolve_auth(), NoAuth)
    assert resolve_auth(basic=basic) is basic
    assert resolve_auth(oauth=oauth) is oauth
    assert resolve_auth(basic=basic, oauth=oauth) is oauth
    assert NoAuth().requests_auth() is None


def test_empty_password_is_allowed():
    auth = BasicAuth({"user": "alice", "pass": ""}).requests_auth()

    assert (auth.username, auth.password) == ("alice", "")


def test_none_credential_counts_as_missing():
    with pytest.raises(AuthError, match="pass"):
        BasicAuth({"user": "alice", "pass": None})
