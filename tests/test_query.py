"""Tests for the query/filter engine."""

import itertools

import pytest

from eventdesk.errors import ValidationError
from eventdesk.models import EventStatus
from eventdesk.search.query import EventFilter, matches_search, paginate, query


def _ids(records):
    return [r.id for r in records]


class TestQuery:
    """Tests for query()."""

    def test_no_filters_returns_copy(self, five_events):
        """Without filters everything comes back in a new list."""
        result = query(five_events)
        assert result == five_events
        assert result is not five_events

    def test_result_mutation_does_not_touch_input(self, five_events):
        result = query(five_events)
        result.clear()
        assert len(five_events) == 5

    def test_status_filter_preserves_order(self, five_events):
        """Three published events in their original relative order."""
        result = query(five_events, {"status": "published"})
        assert _ids(result) == ["evt-1", "evt-2", "evt-4"]

    def test_category_filter(self, five_events):
        assert _ids(query(five_events, {"category": "Community"})) == ["evt-4", "evt-5"]

    def test_featured_filter(self, five_events):
        assert _ids(query(five_events, {"featured": True})) == ["evt-1", "evt-5"]
        assert _ids(query(five_events, {"featured": False})) == ["evt-2", "evt-3", "evt-4"]

    def test_search_hits_every_field(self, five_events):
        """Search matches title, description, short description or a tag."""
        assert _ids(query(five_events, {"search": "tech"})) == [
            "evt-1",
            "evt-3",
            "evt-4",
            "evt-5",
        ]

    def test_search_is_case_insensitive(self, five_events):
        assert query(five_events, {"search": "TECH"}) == query(
            five_events, {"search": "tech"}
        )

    def test_filters_are_anded(self, five_events):
        result = query(
            five_events,
            EventFilter(status=EventStatus.PUBLISHED, featured=True, search="summit"),
        )
        assert _ids(result) == ["evt-1"]

    def test_empty_values_impose_nothing(self, five_events):
        """Empty strings behave like omitted filters."""
        assert len(query(five_events, {"status": "", "category": "", "search": ""})) == 5
        assert len(query(five_events, EventFilter(status=""))) == 5

    def test_empty_collection(self):
        assert query([], {"status": "published"}) == []

    def test_unknown_filter_key_rejected(self, five_events):
        with pytest.raises(ValidationError) as exc_info:
            query(five_events, {"colour": "red"})
        assert "colour" in exc_info.value.errors

    def test_unknown_status_rejected(self, five_events):
        """A status outside the vocabulary is a typed validation error."""
        with pytest.raises(ValidationError) as exc_info:
            query(five_events, {"status": "bogus"})
        assert list(exc_info.value.errors) == ["status"]

    @pytest.mark.parametrize(
        "status,category,featured,search",
        list(
            itertools.product(
                [None, "published", "draft", "cancelled"],
                [None, "Community", "Music"],
                [None, True, False],
                [None, "tech", "jazz"],
            )
        ),
    )
    def test_no_false_positives_or_negatives(
        self, five_events, status, category, featured, search
    ):
        """Result is exactly the subset satisfying every supplied predicate."""
        criteria = EventFilter(
            status=status, category=category, featured=featured, search=search
        )
        expected = [
            r
            for r in five_events
            if (status is None or r.status == status)
            and (category is None or r.category == category)
            and (featured is None or r.is_featured == featured)
            and (search is None or matches_search(r, search))
        ]
        assert query(five_events, criteria) == expected


class TestPaginate:
    """Tests for paginate()."""

    def test_first_page(self, five_events):
        page = paginate(five_events, page=1, per_page=2)
        assert _ids(page.items) == ["evt-1", "evt-2"]
        assert page.total == 5
        assert page.pages == 3

    def test_last_partial_page(self, five_events):
        page = paginate(five_events, page=3, per_page=2)
        assert _ids(page.items) == ["evt-5"]

    def test_page_past_end_is_empty(self, five_events):
        assert paginate(five_events, page=9, per_page=2).items == []

    def test_default_page_size_is_ten(self, five_events):
        page = paginate(five_events)
        assert page.per_page == 10
        assert page.pages == 1

    def test_empty_listing(self):
        page = paginate([])
        assert page.items == []
        assert page.pages == 0

    def test_rejects_page_zero(self, five_events):
        with pytest.raises(ValueError):
            paginate(five_events, page=0)
