import csv
from pathlib import Path

import pytest
from survivordle.engine import Evaluator
from survivordle.harness import GameSession, MAX_GUESSES, run_batch, run_case, share_text, summarize
from survivordle.harness.io import pattern, write_csv
from survivordle.solvers import create_solver, get_solver_ids
from survivordle.solvers.base import BaseSolver


class _FixedSolver(BaseSolver):
    id = "fixed_for_tests"

    def __init__(self, pick):
        super().__init__()
        self.pick = pick

    def next_guess(self, state):
        return self.pick


# --- session ---
def test_session_win(small_pool, target):
    s = GameSession(target)
    assert s.remaining == MAX_GUESSES == 8
    s.submit(small_pool[1])
    assert not s.over and s.remaining == 7
    s.submit(target)
    assert s.won and s.over
    with pytest.raises(ValueError):
        s.submit(small_pool[2])


def test_session_rejects_duplicate_guess(small_pool, target):
    s = GameSession(target)
    s.submit(small_pool[3])
    with pytest.raises(ValueError, match="Already guessed"):
        s.submit(small_pool[3])
    assert len(s.guesses) == 1


def test_session_budget_and_give_up(small_pool, target):
    s = GameSession(target, max_guesses=2)
    s.submit(small_pool[1])
    s.submit(small_pool[2])
    assert s.over and not s.won

    s2 = GameSession(target)
    s2.give_up()
    assert s2.over and s2.gave_up and not s2.won

    with pytest.raises(ValueError):
        GameSession(target, max_guesses=0)


# --- share text / patterns ---
def test_share_text(small_pool, target):
    ev = Evaluator()
    results = [ev.evaluate(small_pool[1], target), ev.evaluate(target, target)]
    text = share_text(12, results, True, hints_used=["Neighbors"])
    assert text.splitlines() == [
        "Survivordle #12 — 2/8 🔥",
        "💡 Neighbors hint used",
        "🟩🟩🟧⬛⬛🟩🟧⬛🟧",
        "🟩" * 9,
    ]
    assert share_text(3, results[:1], False).splitlines()[0] == "Survivordle #3 — X/8 🔥"
    assert pattern(results[0]) == "GGY--GY-Y"


# --- simulated games ---
@pytest.mark.parametrize("solver_id", ["random_consistent", "max_patterns"])
def test_run_case_smoke(small_pool, solver_id):
    solver = create_solver(solver_id)
    for target in small_pool:
        r = run_case(solver, target, pool=small_pool, seed=42)
        assert r["success"] is True
        assert r["answer"] == target.id
        assert r["history"][-1][0].id == target.id
        # every guess is distinct
        ids = [g.id for g, _ in r["history"]]
        assert len(ids) == len(set(ids)) == r["guesses"]


def test_run_case_out_of_guesses(small_pool, target):
    r = run_case(_FixedSolver(small_pool[2]), target, pool=small_pool, max_turns=1)
    assert r["success"] is False and r["guesses"] == 1
    with pytest.raises(ValueError):
        run_case(_FixedSolver(target), target, pool=small_pool, max_turns=0)


def test_run_batch_and_summarize(small_pool):
    solver = create_solver("random_consistent")
    results = run_batch(solver, small_pool, pool=small_pool, seed=7, sample=4)
    assert len(results) == 4
    summary = summarize(results)
    assert summary["games"] == 4 and summary["wins"] == 4
    assert summary["win_rate"] == 1.0
    assert sum(summary["distribution"]) == 4
    assert 1.0 <= summary["mean_guesses"] <= len(small_pool)


def test_summarize_distribution():
    results = [
        {"success": True, "guesses": 2},
        {"success": True, "guesses": 4},
        {"success": False, "guesses": 8},
    ]
    s = summarize(results, max_turns=8)
    assert s["wins"] == 2
    assert s["win_rate"] == pytest.approx(2 / 3)
    assert s["mean_guesses"] == 3.0
    assert s["distribution"] == [0, 1, 0, 1, 0, 0, 0, 0]
    assert summarize([])["mean_guesses"] is None


def test_write_csv(tmp_path: Path, small_pool, target):
    r = run_case(_FixedSolver(small_pool[1]), target, pool=small_pool, max_turns=1)
    r["solver_id"] = "fixed"
    path = write_csv([r], str(tmp_path / "run.csv"), max_turns=2)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["guess_1"] == "deshawn_41"
    assert rows[0]["patt_1"] == "'GGY--GY-Y"
    assert rows[0]["guess_2"] == "" and rows[0]["success"] == "False"


def test_registry_lists_solvers():
    assert get_solver_ids() == ["max_patterns", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("entropy")
