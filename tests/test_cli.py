import json

import pytest

from housematch.cli import _parse_weight_pairs, main


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def _listing(pid: str, bedrooms: int) -> dict:
    return {
        "id": pid,
        "property_type": "apartment",
        "square_meters": 60,
        "rooms": {"bedrooms": bedrooms, "bathrooms": 1},
        "address": {"city": "Amsterdam"},
        "monthly_rent": {"cold": 900, "warm": 1000},
    }


def test_cli_score_json(tmp_path, capsys):
    prop = _write(tmp_path, "prop.json", _listing("p1", 2))
    prefs = _write(tmp_path, "prefs.json", {"desired_bedrooms": 2, "preferred_city": "Amsterdam"})

    rc = main(["score", "--property", prop, "--preferences", prefs, "--json"])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["overall"] == 100
    assert out["breakdown"]["bedrooms"] == 100
    assert out["breakdown"]["price"] is None
    assert out["quality"] == {"label": "Excellent Match", "tier": "excellent"}


def test_cli_score_text_with_weights(tmp_path, capsys):
    prop = _write(tmp_path, "prop.json", _listing("p1", 1))
    prefs = _write(tmp_path, "prefs.json", {"desired_bedrooms": 2, "preferred_city": "Rotterdam"})

    rc = main(
        ["score", "--property", prop, "--preferences", prefs, "--weight", "bedrooms=1", "--weight", "location=0"]
    )

    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("p1: Good Match")
    assert "overall=75" in out
    # A zero weight keeps the criterion in the breakdown but out of the overall.
    assert "location=60 (w=0.00)" in out


def test_cli_rank_pages_with_cursor(tmp_path, capsys):
    props = _write(tmp_path, "props.json", [_listing("short", 1), _listing("exact", 2), _listing("extra", 3)])
    prefs = _write(tmp_path, "prefs.json", {"desired_bedrooms": 2})

    rc = main(["rank", "--properties", props, "--preferences", prefs, "--page-size", "2", "--json"])
    assert rc == 0
    first = json.loads(capsys.readouterr().out)
    assert [item["property"]["id"] for item in first["page"]] == ["exact", "extra"]
    assert first["total"] == 3
    assert first["continue_cursor"] == "2"

    rc = main(["rank", "--properties", props, "--preferences", prefs, "--page-size", "2", "--cursor", "2", "--json"])
    assert rc == 0
    second = json.loads(capsys.readouterr().out)
    assert [item["property"]["id"] for item in second["page"]] == ["short"]
    assert second["is_done"] is True


def test_cli_rank_requires_a_list(tmp_path):
    props = _write(tmp_path, "props.json", _listing("p1", 2))
    prefs = _write(tmp_path, "prefs.json", {"desired_bedrooms": 2})

    with pytest.raises(ValueError, match="JSON list"):
        main(["rank", "--properties", props, "--preferences", prefs])


def test_parse_weight_pairs():
    weights = _parse_weight_pairs(["price=10", "pet-friendly=2.5"])
    assert weights.price == 10
    assert weights.pet_friendly == 2.5
    assert weights.location is None

    with pytest.raises(ValueError, match="expected NAME=VALUE"):
        _parse_weight_pairs(["price"])
    with pytest.raises(ValueError, match="Unknown criterion"):
        _parse_weight_pairs(["garden=3"])
