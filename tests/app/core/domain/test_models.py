"""Tests for domain model behaviour."""
import pytest

from src.app.core.domain.models import PagedResult, User


@pytest.mark.parametrize(
    "page, page_size, total, expected",
    [
        (1, 10, 1, False),
        (1, 10, 10, False),
        (1, 10, 11, True),
        (2, 10, 25, True),
        (3, 10, 25, False),
        (1, 25, 0, False),
    ],
)
def test_has_next_page(page, page_size, total, expected):
    paged = PagedResult[User](items=[], page=page, page_size=page_size, total=total)

    assert paged.has_next_page is expected


def test_has_next_page_is_serialized():
    paged = PagedResult[User](items=[], page=1, page_size=10, total=11)

    assert paged.model_dump()["has_next_page"] is True


def test_new_user_has_no_id():
    assert User().id == 0
