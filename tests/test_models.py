import pytest

from linkedin_v2.domain.models import Mash, ShareRequest, AssetUploadRequest
from linkedin_v2.utils.urn_utils import normalize_person_urn


def test_mash_nested_attribute_access():
    mash = Mash.from_json('{"value": {"elements": [{"urn": "urn:li:share:1"}]}}')

    assert mash.value.elements[0].urn == "urn:li:share:1"
    assert isinstance(mash["value"], Mash)


def test_mash_missing_attribute():
    with pytest.raises(AttributeError):
        Mash().missing


def test_mash_set_attribute_converts():
    mash = Mash()
    mash.meta = {"a": {"b": 2}}

    assert mash["meta"].a.b == 2


def test_mash_rejects_non_objects():
    with pytest.raises(ValueError):
        Mash.from_json("[1, 2]")


def test_share_request_options_skip_unset_fields():
    request = ShareRequest(author="urn:li:person:x", extra={"lifecycleState": "DRAFT", "foo": 1})

    assert request.to_options() == {"author": "urn:li:person:x", "lifecycleState": "DRAFT", "foo": 1}


def test_image_share():
    options = ShareRequest.image("urn:li:person:x", "look", "urn:li:digitalmediaAsset:C1").to_options()
    content = options["specificContent"]["com.linkedin.ugc.ShareContent"]

    assert content["shareMediaCategory"] == "IMAGE"
    assert content["media"] == [{"status": "READY", "media": "urn:li:digitalmediaAsset:C1"}]


def test_asset_upload_request_owner_only():
    body = AssetUploadRequest(owner="urn:li:organization:42").to_body()

    assert body["registerUploadRequest"]["owner"] == "urn:li:organization:42"
    assert body["registerUploadRequest"]["recipes"] == ["urn:li:digitalmediaRecipe:feedshare-image"]


@pytest.mark.parametrize("value, expected", [
    ("abc123", "urn:li:person:abc123"),
    (" urn:li:person:abc123 ", "urn:li:person:abc123"),
    ("urn:li:organization:42", "urn:li:organization:42"),
    ("", None),
    (None, None),
])
def test_normalize_person_urn(value, expected):
    assert normalize_person_urn(value) == expected
