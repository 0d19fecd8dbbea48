from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

import pytest

from storefront.interfaces.http.dto.query import CartListQuery, ListQuery


@dataclass(frozen=True)
class Row:
    id: int


ROWS = [Row(3), Row(1), Row(2)]


def test_defaults_keep_order_and_length() -> None:
    assert ListQuery().apply(ROWS) == ROWS


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        ({"sort": "desc"}, [3, 2, 1]),
        ({"sort": " DESC "}, [3, 2, 1]),
        ({"sort": "desc", "limit": "2"}, [3, 2]),
        ({"limit": "1"}, [3]),
        ({"limit": "-5"}, [3, 1, 2]),
        ({"limit": ""}, [3, 1, 2]),
        ({"limit": "50"}, [3, 1, 2]),
        ({"sort": "random", "limit": "2"}, [3, 1]),
    ],
)
def test_apply(params: dict[str, str], expected: list[int]) -> None:
    query = ListQuery.model_validate(params)

    assert [row.id for row in query.apply(ROWS)] == expected


def test_unknown_sort_falls_back_to_ascending() -> None:
    query = ListQuery.model_validate({"sort": "descending"})

    assert query.descending is False
    assert [row.id for row in query.apply(ROWS)] == [3, 1, 2]


def test_non_numeric_limit_is_unbounded() -> None:
    query = ListQuery.model_validate({"limit": "ten"})

    assert query.limit is None
    assert len(query.apply(ROWS)) == 3


def test_cart_query_normalizes_dates_to_utc() -> None:
    query = CartListQuery.model_validate(
        {"startdate": "2025-06-01T10:00:00", "enddate": "2025-06-01T12:00:00+02:00"}
    )

    assert query.startdate == datetime(2025, 6, 1, 10, 0, tzinfo=UTC)
    assert query.enddate == datetime(2025, 6, 1, 10, 0, tzinfo=UTC)
    assert query.has_date_range is True


def test_cart_query_without_dates() -> None:
    assert CartListQuery.model_validate({"startdate": ""}).has_date_range is False
