"""
One player's game against one daily target.

Owns the state the evaluator never holds: the guesses so far, their cell
rows, and whether the game is over (won, out of guesses, or given up).
"""

from __future__ import annotations

from typing import List, Optional

from survivordle.engine import Appearance, Cell, Evaluator, is_win

# Guess budget per puzzle.
MAX_GUESSES = 8


class GameSession:
    def __init__(self, target: Appearance, evaluator: Optional[Evaluator] = None,
                 max_guesses: int = MAX_GUESSES):
        if target is None:
            raise ValueError("a game needs a target appearance")
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1; got {max_guesses}")
        self.target = target
        self.evaluator = evaluator or Evaluator()
        self.max_guesses = max_guesses
        self.guesses: List[Appearance] = []
        self.results: List[List[Cell]] = []
        self.won = False
        self.gave_up = False

    @property
    def over(self) -> bool:
        return self.won or self.gave_up or len(self.guesses) >= self.max_guesses

    @property
    def remaining(self) -> int:
        return self.max_guesses - len(self.guesses)

    def submit(self, guess: Appearance) -> List[Cell]:
        """
        Score a guess and record it.

        Raises ValueError if the game is already over or the same appearance
        was guessed before.
        """
        if self.over:
            raise ValueError("game is over")
        if guess is None:
            raise ValueError("a guess needs an appearance")
        if any(g.id == guess.id for g in self.guesses):
            raise ValueError("Already guessed that appearance!")

        cells = self.evaluator.evaluate(guess, self.target)
        self.guesses.append(guess)
        self.results.append(cells)
        if is_win(cells):
            self.won = True
        return cells

    def give_up(self) -> None:
        self.gave_up = True
