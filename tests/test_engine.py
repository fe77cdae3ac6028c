import dataclasses

import pytest
from survivordle.engine import (
    CLASSIC_ATTRIBUTES,
    Evaluator,
    EvaluatorConfig,
    Thresholds,
    compare_jury_tier,
    compare_numeric,
    compare_text,
    evaluate,
    feedback_key,
    filter_candidates,
    is_win,
    normalize,
    search,
    validate_guess,
)
from survivordle.engine.scoring import Cell


# --- comparators: golden tables ---
@pytest.mark.parametrize("guess,target,threshold,expected", [
    (10, 10, 2, ("correct", None)),
    (12, 10, 2, ("close", "down")),
    (8, 10, 2, ("close", "up")),
    (13, 10, 2, ("wrong", "down")),
    (7, 10, 2, ("wrong", "up")),
    (1, 4, 3, ("close", "up")),
    (1, 5, 3, ("wrong", "up")),
    (None, 30, 5, ("wrong", None)),
    (30, None, 5, ("wrong", None)),
    (None, None, 5, ("wrong", None)),
    (5, 6, 0, ("wrong", "up")),
])
def test_compare_numeric_golden(guess, target, threshold, expected):
    assert compare_numeric(guess, target, threshold) == expected


@pytest.mark.parametrize("x", [-3, 0, 1, 24, 41, 1000])
@pytest.mark.parametrize("t", [0, 1, 2, 5])
def test_compare_numeric_identity_and_boundary(x, t):
    assert compare_numeric(x, x, t) == ("correct", None)
    if t:
        assert compare_numeric(x, x + t, t) == ("close", "up")
    assert compare_numeric(x, x + t + 1, t) == ("wrong", "up")
    assert compare_numeric(x + t + 1, x, t) == ("wrong", "down")


def test_compare_numeric_zero_threshold_is_exact_only():
    assert compare_numeric(3, 3, 0) == ("correct", None)
    assert compare_numeric(3, 4, 0) == ("wrong", "up")


@pytest.mark.parametrize("guess,target,expected", [
    ("Ua", "Ua", ("correct", None)),
    ("Ua", "ua", ("wrong", None)),
    ("M", "F", ("wrong", None)),
    (True, True, ("correct", None)),
    (False, True, ("wrong", None)),
    (None, "Ua", ("wrong", None)),
    (None, None, ("wrong", None)),
])
def test_compare_text_golden(guess, target, expected):
    assert compare_text(guess, target) == expected


@pytest.mark.parametrize("guess,target,expected", [
    ("Winner", "Winner", ("correct", None)),
    ("Finalist", "Winner", ("close", "up")),
    ("Winner", "Finalist", ("close", "down")),
    ("Jury", "Winner", ("wrong", "up")),
    ("Non-Jury", "Jury", ("close", "up")),
    ("Winner", "Non-Jury", ("wrong", "down")),
    ("Sole Survivor", "Winner", ("wrong", None)),
    ("Winner", "Medevac", ("wrong", None)),
    (None, "Jury", ("wrong", None)),
])
def test_compare_jury_tier_golden(guess, target, expected):
    assert compare_jury_tier(guess, target) == expected


def test_compare_jury_tier_threshold_is_configurable():
    assert compare_jury_tier("Jury", "Winner", threshold=2) == ("close", "up")
    assert compare_jury_tier("Finalist", "Winner", threshold=0) == ("wrong", "up")


# --- evaluator ---
LABELS = ["Season", "Season Name", "Placement", "Gender", "Tribe", "Returnee",
          "Age", "Episode Out", "Finish", "Voted Out Between"]


def test_evaluate_target_against_itself_wins(target):
    cells = evaluate(target, target)
    assert [c.label for c in cells] == LABELS
    assert all(c.status == "correct" and c.hint is None for c in cells[:-1])
    assert cells[-1].status == "reveal"
    assert is_win(cells) is True


def test_evaluate_copy_of_target_wins(target):
    # same appearance, rebuilt (e.g. reloaded from the pool)
    assert is_win(evaluate(dataclasses.replace(target), target)) is True


@pytest.mark.parametrize("changes", [
    {"season": 30},
    {"age": 60},
    {"jury_tier": "Non-Jury"},
    {"season": 30, "age": 60, "jury_tier": "Non-Jury"},
])
def test_same_id_with_different_values_is_scored_normally(target, changes):
    guess = dataclasses.replace(target, **changes)
    cells = {c.key: c for c in evaluate(guess, target)}
    assert is_win(cells.values()) is False
    for key in changes:
        assert cells[key].status != "correct"
    assert cells["season_name"].status == "correct"


def test_evaluate_mixed_feedback(small_pool, target):
    deshawn = small_pool[1]
    cells = evaluate(deshawn, target)
    got = [(c.label, c.display, c.status, c.hint) for c in cells]
    assert got == [
        ("Season", "S41", "correct", None),
        ("Season Name", "Survivor 41", "correct", None),
        ("Placement", "#2", "close", "down"),
        ("Gender", "M", "wrong", None),
        ("Tribe", "Luvu", "wrong", None),
        ("Returnee", "No", "correct", None),
        ("Age", "26", "close", "down"),
        ("Episode Out", "?", "wrong", None),
        ("Finish", "Finalist", "close", "up"),
        ("Voted Out Between", "Deshawn Radden", "reveal", None),
    ]
    assert is_win(cells) is False


def test_evaluate_season_hint_direction(make_appearance, target):
    guess = make_appearance(id="x_12", season=12)
    t = dataclasses.replace(target, season=10)
    season = evaluate(guess, t)[0]
    assert (season.status, season.hint) == ("close", "down")


def test_evaluate_absent_age_is_wrong(make_appearance, target):
    guess = make_appearance(id="x_41", age=None)
    t = dataclasses.replace(target, age=30)
    age = next(c for c in evaluate(guess, t) if c.key == "age")
    assert (age.status, age.hint, age.display) == ("wrong", None, "?")


@pytest.mark.parametrize("field,value", [
    ("season", 30),
    ("season_name", "Winners at War"),
    ("placement", 9),
    ("gender", "M"),
    ("starting_tribe", "Luvu"),
    ("returnee", True),
    ("age", 50),
    ("episode_out", 4),
    ("jury_tier", "Jury"),
])
def test_changing_one_scored_field_breaks_win(make_appearance, field, value):
    t = make_appearance(episode_out=14)
    guess = dataclasses.replace(t, id="other_41")
    assert is_win(evaluate(guess, t)) is True
    assert is_win(evaluate(dataclasses.replace(guess, **{field: value}), t)) is False


def test_reveal_cell_shows_target_neighbours(make_appearance):
    t = make_appearance(placed_after="Kenzie", placed_before="Maryanne")
    guess = make_appearance(id="g_41", placed_after="Zed", placed_before=None)
    reveal = evaluate(guess, t)[-1]
    assert reveal.display == "Kenzie → Maryanne"
    assert evaluate(guess, make_appearance(placed_after=None))[-1].display == "—"


def test_is_win_ignores_reveal_cells():
    cells = [Cell("season", "Season", "S1", "correct"), Cell("reveal", "R", "—", "reveal")]
    assert is_win(cells) is True
    cells.append(Cell("age", "Age", "?", "close", "up"))
    assert is_win(cells) is False


def test_classic_projection_uses_same_evaluator(small_pool, target):
    ev = Evaluator(EvaluatorConfig(attributes=CLASSIC_ATTRIBUTES, reveal=False))
    cells = ev.evaluate(small_pool[1], target)
    assert [c.label for c in cells] == ["Season", "Placement", "Gender", "Tribe", "Returnee", "Age"]
    full = {c.key: c for c in evaluate(small_pool[1], target)}
    assert all(c == full[c.key] for c in cells)


def test_custom_thresholds(small_pool, target):
    ev = Evaluator(EvaluatorConfig(thresholds=Thresholds(placement=0, age=1)))
    cells = {c.key: c for c in ev.evaluate(small_pool[1], target)}
    assert cells["placement"].status == "wrong"
    assert cells["age"].status == "wrong"


def test_config_validation():
    with pytest.raises(ValueError):
        Thresholds(season=-1)
    with pytest.raises(ValueError):
        EvaluatorConfig(attributes=(dataclasses.replace(CLASSIC_ATTRIBUTES[0], kind="fuzzy"),))
    with pytest.raises(ValueError):
        EvaluatorConfig(attributes=(dataclasses.replace(CLASSIC_ATTRIBUTES[0], threshold=None),))


def test_evaluate_requires_both_records(target):
    with pytest.raises(ValueError):
        evaluate(None, target)
    with pytest.raises(ValueError):
        evaluate(target, None)


# --- candidate filtering / validation ---
def test_filter_candidates_keeps_target(small_pool):
    ev = Evaluator()
    target = small_pool[0]
    guess = small_pool[3]
    cells = ev.evaluate(guess, target)
    cand = filter_candidates(small_pool, [(guess, cells)], ev)
    assert target in cand
    assert guess not in cand
    for c in cand:
        assert feedback_key(ev.evaluate(guess, c)) == feedback_key(cells)


def test_filter_candidates_empty_history_keeps_all(small_pool):
    assert filter_candidates(small_pool, [], Evaluator()) == small_pool


def test_validate_guess(small_pool, make_appearance):
    ids = [a.id for a in small_pool]
    assert validate_guess(small_pool[2], ids) is True
    assert validate_guess(small_pool[2], ids, previous_ids=[small_pool[2].id]) is False
    assert validate_guess(make_appearance(id="nobody_1"), ids) is False
    assert validate_guess("erika_41", ids) is False


def test_search_normalizes(small_pool, make_appearance):
    pool = small_pool + [make_appearance(id="mc_37", name="J.T. Thomas")]
    assert normalize("J.T.") == "jt"
    assert [a.id for a in search(pool, "jt")] == ["mc_37"]
    assert [a.id for a in search(pool, "HEATHER")] == ["heather_41"]
    assert search(pool, "   ") == []
    assert len(search(pool, "a", limit=2)) == 2
