"""
Tests for the Thumbor URL grammar and signing.
"""

import base64
import hashlib
import hmac
from urllib.parse import urlparse

import pytest

from thumbor_transform.ops.thumbor.url import ThumborUrl, sign


def _expected_signature(path: str, key: str) -> str:
    digest = hmac.new(key.encode(), path.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode().replace("+", "-").replace("/", "_")


def test_unsafe_without_key():
    url = ThumborUrl("http://thumbor.test/", "", "images/a.jpg").resize(300, 200)
    assert str(url) == "http://thumbor.test/unsafe/300x200/images/a.jpg"


def test_signed_path():
    url = ThumborUrl("http://thumbor.test", "secret", "images/a.jpg").fit_in(300, 200)
    path = "fit-in/300x200/images/a.jpg"
    assert url.path() == path
    assert str(url) == f"http://thumbor.test/{_expected_signature(path, 'secret')}/{path}"


def test_sign_is_urlsafe():
    signature = sign("300x200/images/a.jpg", "my-security-key")
    assert "+" not in signature and "/" not in signature
    assert len(signature) == 28


def test_command_order():
    url = (
        ThumborUrl("http://thumbor.test", None, "/a.jpg")
        .add_filter("quality", 80)
        .valign("top")
        .halign("left")
        .resize(10, 20)
        .add_filter("sharpen", 0.5, 0.5, True)
    )
    assert url.commands() == [
        "10x20",
        "left",
        "top",
        "filters:quality(80):sharpen(0.5,0.5,true)",
    ]
    assert str(url) == (
        "http://thumbor.test/unsafe/10x20/left/top/"
        "filters:quality(80):sharpen(0.5,0.5,true)/a.jpg"
    )


def test_missing_dimension_keeps_proportion():
    url = ThumborUrl("http://thumbor.test", None, "a.jpg").resize(300, None)
    assert url.commands() == ["300x0"]


def test_filter_without_arguments():
    url = ThumborUrl("http://thumbor.test", None, "a.jpg").add_filter("stretch")
    assert url.filters == ["stretch()"]


def test_image_path_is_quoted_and_signed():
    url = ThumborUrl("http://thumbor.test", "secret", "/img/a #1.jpg").resize(10, 10)
    path = "10x10/img/a%20%231.jpg"
    assert url.path() == path
    assert str(url) == f"http://thumbor.test/{_expected_signature(path, 'secret')}/{path}"
    assert urlparse(str(url)).path.endswith("/img/a%20%231.jpg")


def test_remove_filter():
    url = (
        ThumborUrl("http://thumbor.test", None, "a.jpg")
        .add_filter("format", "png")
        .add_filter("quality", 90)
        .remove_filter("format")
    )
    assert url.filters == ["quality(90)"]


if __name__ == "__main__":
    pytest.main()
