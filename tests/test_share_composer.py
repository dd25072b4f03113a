import json

import pytest

from linkedin_v2.core.constants import SHARE_DEFAULTS
from linkedin_v2.core.exceptions import TransportError, MalformedResponse
from linkedin_v2.domain.models import ShareRequest, merge_share_options
from linkedin_v2.services.share_composer import ShareComposer

from conftest import DummyResponse, FakeConnection


def _sent_body(connection):
    assert len(connection.calls) == 1
    return json.loads(connection.calls[0]["data"])


def test_empty_options_send_exactly_the_defaults():
    connection = FakeConnection()
    ShareComposer(connection).create_share({})

    assert _sent_body(connection) == {
        "lifecycleState": "PUBLISHED",
        "visibility": {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"},
    }
    assert connection.calls[0]["path"] == "/ugcPosts"
    assert connection.calls[0]["headers"] == {"Content-Type": "application/json"}


def test_visibility_is_replaced_not_deep_merged():
    connection = FakeConnection()
    ShareComposer(connection).create_share({"visibility": "CONNECTIONS"})

    body = _sent_body(connection)
    assert body["visibility"] == "CONNECTIONS"
    assert body["lifecycleState"] == "PUBLISHED"


def test_caller_options_win_and_are_passed_through():
    connection = FakeConnection()
    options = {
        "author": "urn:li:person:abc123",
        "lifecycleState": "DRAFT",
        "specificContent": {"com.linkedin.ugc.ShareContent": {"shareMediaCategory": "NONE"}},
    }
    ShareComposer(connection).create_share(options)

    body = _sent_body(connection)
    assert body == {
        "lifecycleState": "DRAFT",
        "visibility": {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"},
        "author": "urn:li:person:abc123",
        "specificContent": {"com.linkedin.ugc.ShareContent": {"shareMediaCategory": "NONE"}},
    }


def test_merge_never_mutates_the_defaults():
    merged = merge_share_options({})
    merged["visibility"]["com.linkedin.ugc.MemberNetworkVisibility"] = "CONNECTIONS"

    assert SHARE_DEFAULTS["visibility"] == {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"}


def test_author_is_not_validated_locally():
    connection = FakeConnection()
    ShareComposer(connection).create_share({"lifecycleState": "PUBLISHED"})

    assert "author" not in _sent_body(connection)


def test_share_request_is_converted_to_options():
    connection = FakeConnection()
    ShareComposer(connection).create_share(ShareRequest.text("urn:li:person:abc123", "hello"))

    body = _sent_body(connection)
    assert body["author"] == "urn:li:person:abc123"
    assert body["specificContent"]["com.linkedin.ugc.ShareContent"]["shareCommentary"] == {"text": "hello"}
    assert body["visibility"] == {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"}


def test_response_body_is_returned_with_attribute_access():
    connection = FakeConnection({"/ugcPosts": DummyResponse(201, '{"id": "urn:li:share:1", "meta": {"a": 1}}')})
    result = ShareComposer(connection).create_share({"author": "urn:li:person:x"})

    assert result.id == "urn:li:share:1"
    assert result.meta.a == 1
    assert result["meta"]["a"] == 1


def test_empty_body_uses_restli_id_header():
    response = DummyResponse(201, "", headers={"x-restli-id": "urn:li:share:42"})
    result = ShareComposer(FakeConnection({"/ugcPosts": response})).create_share({})

    assert result == {"id": "urn:li:share:42"}


def test_empty_body_without_header_gives_empty_result():
    result = ShareComposer(FakeConnection({"/ugcPosts": DummyResponse(201, "")})).create_share({})

    assert result == {}


def test_transport_errors_propagate_unmodified():
    error = TransportError("Unauthorized", status_code=401)
    composer = ShareComposer(FakeConnection({"/ugcPosts": error}))

    with pytest.raises(TransportError) as exc_info:
        composer.create_share({})

    assert exc_info.value is error


def test_non_json_body_is_malformed():
    composer = ShareComposer(FakeConnection({"/ugcPosts": DummyResponse(201, "<html>")}))

    with pytest.raises(MalformedResponse):
        composer.create_share({})
