import pytest

from hype_engine.estimators import (
    CATEGORY_ARPU,
    arpu_for,
    estimate_downloads,
    estimate_revenue,
    estimate_web_traffic,
)


def test_downloads_top_rank():
    assert estimate_downloads(1, 0, 5, 0) == 10_000_000


def test_downloads_factors_add_up():
    # rank 100 -> 10_000, 10 reviews -> 2_500, 100 days -> 1_000
    assert estimate_downloads(100, 10, 5, 100) == 13_500
    assert estimate_downloads(100, 10, 2.5, 100) == 3_375


def test_downloads_rank_factor_floor():
    assert estimate_downloads(1_000_000, 0, 5, 0) == 1


def test_downloads_zero_rating():
    assert estimate_downloads(3, 5000, 0, 365) == 0


def test_downloads_monotonicity():
    base = dict(category_rank=50, review_count=100, rating=4.0, days_since_launch=30)
    ref = estimate_downloads(**base)
    assert estimate_downloads(**{**base, "review_count": 200}) >= ref
    assert estimate_downloads(**{**base, "days_since_launch": 90}) >= ref
    assert estimate_downloads(**{**base, "rating": 4.5}) >= ref
    assert estimate_downloads(**{**base, "category_rank": 80}) <= ref


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(category_rank=0, review_count=1, rating=4, days_since_launch=1),
        dict(category_rank=-3, review_count=1, rating=4, days_since_launch=1),
        dict(category_rank=1, review_count=-1, rating=4, days_since_launch=1),
        dict(category_rank=1, review_count=1, rating=5.5, days_since_launch=1),
        dict(category_rank=1, review_count=1, rating=4, days_since_launch=-1),
    ],
)
def test_downloads_contract_violations(kwargs):
    with pytest.raises(ValueError):
        estimate_downloads(**kwargs)


def test_arpu_table_has_default():
    assert CATEGORY_ARPU["default"] == 5
    assert arpu_for("Finance") == 15
    assert arpu_for("Astrology") == 5
    with pytest.raises(TypeError):
        CATEGORY_ARPU["Games"] = 100  # type: ignore[index]


def test_revenue_finance():
    assert estimate_revenue(1_000_000, "Finance", 5) == 135_000


def test_revenue_unknown_category_uses_default():
    unknown = estimate_revenue(1_000_000, "Astrology", 5)
    assert unknown == 45_000
    assert unknown == estimate_revenue(1_000_000, "default", 5)


def test_revenue_monotonicity():
    ref = estimate_revenue(500_000, "Games", 4.0)
    assert estimate_revenue(600_000, "Games", 4.0) >= ref
    assert estimate_revenue(500_000, "Games", 4.5) >= ref
    assert estimate_revenue(500_000, "Games", 4.0, has_in_app_purchases=False) <= ref
    assert estimate_revenue(1_000_000, "default", 5, has_in_app_purchases=False) == 15_000


def test_traffic_floor():
    assert estimate_web_traffic(0, 0, 0) == 1000


def test_traffic_sum_of_factors():
    assert estimate_web_traffic(10_000, 10, 5, 100, 10, 4) == 73_000


def test_traffic_rejects_negative_counts():
    with pytest.raises(ValueError):
        estimate_web_traffic(-1, 0, 0)


def test_downloads_round_ties_up():
    # rank 10_000 -> 10, scaled by (2.5 / 5) ** 2 -> 2.5
    assert estimate_downloads(10_000, 0, 2.5, 0) == 3
