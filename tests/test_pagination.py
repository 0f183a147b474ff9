import pytest

from frontier_actions import Page
from frontier_actions.actions.pagination import paginate
from tests.models import UserModel


def test_last_page_of_empty_result():
    page = Page(items=[], total=0, per_page=10)
    assert page.last_page == 1
    assert page.has_more_pages is False


def test_computed_fields_are_serialized():
    data = Page(items=[1, 2], total=5, per_page=2, page=1).model_dump()
    assert data["last_page"] == 3
    assert data["has_more_pages"] is True


def test_page_below_one_is_clamped(session, users):
    page = paginate(session.query(UserModel), per_page=2, page=0)
    assert page.page == 1
    assert len(page.items) == 2


def test_invalid_page_size(session):
    with pytest.raises(ValueError):
        paginate(session.query(UserModel), per_page=0)
