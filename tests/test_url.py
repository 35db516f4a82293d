"""
Tests for storage URI helpers.
"""

import pytest

from thumbor_transform.io.url import is_s3_url, parse_s3_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("s3://assets/images/photo.jpg", ("assets", "images/photo.jpg")),
        ("s3://assets", ("assets", None)),
        ("https://assets.s3.eu-west-1.amazonaws.com/images/photo.jpg", ("assets", "images/photo.jpg")),
        ("https://s3.eu-west-1.amazonaws.com/assets/images/photo.jpg", ("assets", "images/photo.jpg")),
        ("https://cdn.example.com/images/photo.jpg", (None, None)),
    ],
)
def test_parse_s3_url(url, expected):
    assert parse_s3_url(url) == expected


def test_is_s3_url():
    assert is_s3_url("s3://assets/key")
    assert is_s3_url("https://assets.s3.amazonaws.com/key")
    assert not is_s3_url("file:///srv/assets/key")
    assert not is_s3_url("images/photo.jpg")


if __name__ == "__main__":
    pytest.main()
