import pytest

from housematch.config.settings import get_settings
from housematch.domain.models import PropertySnapshot, UserPreferences
from housematch.matching.rank import paginate, rank_properties


def _prop(pid: str, *, bedrooms: int = 2, pet_friendly: bool = False) -> PropertySnapshot:
    return PropertySnapshot(
        id=pid,
        property_type="apartment",
        square_meters=60,
        rooms={"bedrooms": bedrooms, "bathrooms": 1},
        address={"city": "Amsterdam"},
        monthly_rent={"warm": 900},
        pet_friendly=pet_friendly,
    )


def test_rank_orders_best_first():
    props = [_prop("exact", bedrooms=2), _prop("short", bedrooms=1), _prop("extra", bedrooms=3)]
    ranked = rank_properties(props, UserPreferences(desired_bedrooms=2))

    assert [r.property.id for r in ranked] == ["exact", "extra", "short"]
    assert [r.match.overall for r in ranked] == [100, 90, 75]
    assert ranked[0].quality.tier == "excellent"
    assert ranked[2].quality.label == "Good Match"


def test_rank_drops_zero_scores_by_default():
    props = [_prop("no_pets"), _prop("pets", pet_friendly=True)]
    prefs = UserPreferences(requires_pet_friendly=True)

    assert [r.property.id for r in rank_properties(props, prefs)] == ["pets"]
    assert [r.property.id for r in rank_properties(props, prefs, min_score=0)] == ["pets", "no_pets"]


def test_rank_with_no_preferences_returns_nothing():
    # Unconfigured preferences score 0 everywhere, so nothing passes the default threshold.
    assert rank_properties([_prop("a"), _prop("b")], UserPreferences()) == []


def test_rank_ties_keep_input_order():
    props = [_prop("first"), _prop("second"), _prop("third")]
    ranked = rank_properties(props, UserPreferences(desired_bedrooms=2))
    assert [r.property.id for r in ranked] == ["first", "second", "third"]


def test_rank_accepts_mappings_and_weights():
    raw = [_prop("a").model_dump(), _prop("b", bedrooms=1).model_dump()]
    prefs = {"desired_bedrooms": 2, "preferred_city": "Rotterdam"}
    ranked = rank_properties(raw, prefs, {"location": 0})
    # Location weight 0 removes it from the aggregate entirely.
    assert [r.match.overall for r in ranked] == [100, 75]


def test_paginate_walks_through_pages():
    ranked = rank_properties([_prop(str(i)) for i in range(5)], UserPreferences(desired_bedrooms=2))

    first = paginate(ranked, page_size=2)
    assert [r.property.id for r in first.page] == ["0", "1"]
    assert first.total == 5
    assert first.is_done is False
    assert first.continue_cursor == "2"

    last = paginate(ranked, cursor="4", page_size=2)
    assert [r.property.id for r in last.page] == ["4"]
    assert last.is_done is True
    assert last.continue_cursor is None


def test_paginate_past_the_end_is_empty_and_done():
    page = paginate([], cursor="10", page_size=3)
    assert page.page == []
    assert page.is_done is True


def test_paginate_uses_configured_page_size_and_cap():
    settings = get_settings()
    ranking = settings.ranking.model_copy(update={"page_size": 2, "max_page_size": 3})
    settings = settings.model_copy(update={"ranking": ranking})
    ranked = rank_properties([_prop(str(i)) for i in range(5)], UserPreferences(desired_bedrooms=2))

    assert len(paginate(ranked, settings=settings).page) == 2
    assert len(paginate(ranked, page_size=50, settings=settings).page) == 3


@pytest.mark.parametrize("cursor", ["abc", "-1", "1.5"])
def test_paginate_rejects_bad_cursor(cursor):
    with pytest.raises(ValueError, match="Invalid cursor"):
        paginate([], cursor=cursor)


def test_paginate_rejects_non_positive_page_size():
    with pytest.raises(ValueError, match="page_size"):
        paginate([], page_size=0)
