"""Shared fixtures for unit tests."""

import pytest

from linkding_sync.notices import NoticeBoard


@pytest.fixture
def notices() -> NoticeBoard:
    return NoticeBoard()


@pytest.fixture
def sample_records() -> list[dict]:
    """Two API records: one titled with tags, one relying on website_title."""
    return [
        {"title": "A", "url": "http://a", "tag_names": ["x", "y"]},
        {"title": "", "website_title": "B", "url": "http://b", "description": "d"},
    ]


@pytest.fixture
def scenario_text() -> str:
    """Text appended for ``sample_records``, in response order."""
    return (
        "## A \n"
        "### [http://a](http://a) \n"
        "Tags: x y \n"
        "\n"
        "--- \n"
        "## B \n"
        "### [http://b](http://b) \n"
        "d \n"
        "\n"
        "--- \n"
    )
