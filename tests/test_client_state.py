from urllib.parse import parse_qs, urlsplit

import pytest

from aiosoundcloud import ClientState, ConfigurationError, SoundCloudClient


def test_new_client_is_neither_initialized_nor_authorized():
    sc = SoundCloudClient()
    assert not sc.is_initialized
    assert not sc.is_authorized
    assert sc.access_token is None


def test_init_with_token_authorizes_immediately():
    sc = SoundCloudClient()
    sc.init("id", "secret", "https://example.com/cb", "tok")
    assert sc.is_initialized
    assert sc.is_authorized
    assert sc.access_token == "tok"


def test_init_overwrites_previous_configuration():
    sc = SoundCloudClient("id", "secret", "https://example.com/cb")
    sc.init("other-id", "other-secret", "https://example.org/cb")
    assert sc.state.client_id == "other-id"
    assert sc.state.client_secret == "other-secret"
    assert sc.state.redirect_uri == "https://example.org/cb"
    assert not sc.is_authorized


def test_set_token_and_user():
    state = ClientState()
    assert not state.is_authorized
    sc = SoundCloudClient("id", "secret", "https://example.com/cb")
    sc.set_token("abc")
    sc.set_user("42")
    assert sc.is_authorized
    assert sc.access_token == "abc"
    assert sc.user_id == "42"


def test_connect_config():
    sc = SoundCloudClient("id", "secret", "https://example.com/cb")
    assert sc.get_connect_config() == {
        "client_id": "id",
        "client_secret": "secret",
        "redirect_uri": "https://example.com/cb",
        "response_type": "code",
        "scope": "non-expiring",
    }


def test_connect_url_contains_every_config_key_once():
    sc = SoundCloudClient("id", "s&cret", "https://example.com/cb?x=1")
    url = sc.get_connect_url()
    parts = urlsplit(url)

    assert url.startswith("https://soundcloud.com/connect?")
    query = parse_qs(parts.query)
    config = sc.get_connect_config()
    assert set(query) == set(config)
    for key, value in config.items():
        assert query[key] == [value]
        assert parts.query.count(f"{key}=") == 1


def test_connect_url_with_override_params():
    sc = SoundCloudClient("id", "secret", "https://example.com/cb")
    assert sc.get_connect_url({"client_id": "x", "display": "popup"}) == (
        "https://soundcloud.com/connect?client_id=x&display=popup"
    )


def test_from_env(monkeypatch):
    monkeypatch.setenv("SOUNDCLOUD_CLIENT_ID", "env-id")
    monkeypatch.setenv("SOUNDCLOUD_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("SOUNDCLOUD_REDIRECT_URI", "https://example.com/cb")
    monkeypatch.setenv("SOUNDCLOUD_ACCESS_TOKEN", "env-token")

    sc = SoundCloudClient.from_env()
    assert sc.state.client_id == "env-id"
    assert sc.access_token == "env-token"


def test_from_env_missing_variable(monkeypatch):
    monkeypatch.delenv("SOUNDCLOUD_CLIENT_ID", raising=False)
    with pytest.raises(ConfigurationError, match="SOUNDCLOUD_CLIENT_ID"):
        SoundCloudClient.from_env()
