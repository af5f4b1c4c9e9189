from spotify_mcp.logging import redact_payload


def test_redacts_sensitive_keys_recursively():
    payload = {
        "q": "test",
        "access_token": "abc",
        "nested": {"client_secret": "s", "uris": ["spotify:track:1"]},
    }

    assert redact_payload(payload) == {
        "q": "test",
        "access_token": "***REDACTED***",
        "nested": {"client_secret": "***REDACTED***", "uris": ["spotify:track:1"]},
    }
    assert payload["access_token"] == "abc"
