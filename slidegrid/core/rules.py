"""
Merge rules for the sliding-tile puzzle.

A rule pairs a merge predicate with a combine function, plus the values new tiles spawn with.
Predicates and combiners work on scalars as well as elementwise on numpy arrays.
"""

from dataclasses import dataclass, field
from math import isclose
from typing import Any, Callable


@dataclass(frozen=True)
class MergeRule:
    """
    Strategy deciding which adjacent tiles merge and what they become.

    Attributes
    ----------
    name : str
        Identifier of the rule.
    can_merge : Callable
        ``(a, b) -> bool``, whether two adjacent values merge.
    combine : Callable
        ``(a, b) -> int``, value of the tile produced by a merge.
    spawn_values : tuple[int, ...]
        Values a freshly spawned tile can take.
    spawn_probs : tuple[float, ...]
        Probability of each spawn value.
    """

    name: str
    can_merge: Callable[[Any, Any], Any] = field(repr=False)
    combine: Callable[[Any, Any], Any] = field(repr=False)
    spawn_values: tuple[int, ...] = (2, 4)
    spawn_probs: tuple[float, ...] = (0.9, 0.1)

    def __post_init__(self):
        if len(self.spawn_values) != len(self.spawn_probs):
            raise ValueError(f'{self.name}: spawn_values and spawn_probs must have the same length')
        if not isclose(sum(self.spawn_probs), 1.0):
            raise ValueError(f'{self.name}: spawn probabilities must sum to 1, got {sum(self.spawn_probs)}')

    @property
    def spawn_table(self) -> dict[int, float]:
        """Mapping of spawn value to its probability."""
        return dict(zip(self.spawn_values, self.spawn_probs))


def _equal(a, b):
    return a == b


def _double(a, b):
    return a * 2


def _sum_divisible_by_five(a, b):
    return (a + b) % 5 == 0


def _sum(a, b):
    return a + b


# ##: Classic 2048: equal tiles merge into their double.
CLASSIC = MergeRule(name='classic', can_merge=_equal, combine=_double, spawn_values=(2, 4), spawn_probs=(0.9, 0.1))

# ##: Entropy Grid: tiles whose sum is divisible by 5 merge into that sum.
ENTROPY = MergeRule(
    name='entropy', can_merge=_sum_divisible_by_five, combine=_sum, spawn_values=(1, 2), spawn_probs=(0.9, 0.1)
)

RULES: dict[str, MergeRule] = {rule.name: rule for rule in (CLASSIC, ENTROPY)}


def get_rule(rule: str | MergeRule) -> MergeRule:
    """
    Resolve a merge rule.

    Parameters
    ----------
    rule : str or MergeRule
        Rule name (``'classic'`` or ``'entropy'``) or a rule instance, returned as is.

    Returns
    -------
    MergeRule
        The matching rule.

    Raises
    ------
    KeyError
        If no rule has that name.
    """
    if isinstance(rule, MergeRule):
        return rule
    try:
        return RULES[rule]
    except KeyError:
        raise KeyError(f'Unknown merge rule {rule!r}, expected one of {sorted(RULES)}') from None
