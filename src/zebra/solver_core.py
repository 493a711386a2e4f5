"""Backtracking search that fills the zebra row one house at a time.

A search state holds the houses committed so far and, per attribute, the values
nobody has taken yet. From a state at depth k the search builds every candidate
house out of the remaining values, keeps those for which all clues still hold,
and recurses. The first row of five houses that passes is returned up the call
stack and ends the search.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constraints import ZEBRA_CONSTRAINTS, Constraint, first_violation
from .model import ATTRIBUTES, DOMAINS, HOUSE_COUNT, House, NoSolutionError
from src.utils.trace import Tracer, get_tracer

Houses = Tuple[House, ...]
Remaining = Dict[str, Tuple[Any, ...]]

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSE_VALUES


@dataclass(frozen=True)
class SolverConfig:
    """
    Search tuning. Every combination finds the same row; they differ only in
    how much of the space is walked to get there.

    prune_per_attribute: test each clue as soon as the new house has every
        attribute it reads, instead of after all six are chosen.
    ordered_positions: give each new house the lowest free position instead of
        trying every free one. Houses differ only by position, so this skips
        re-exploring the same set of houses in another order.
    """

    prune_per_attribute: bool = True
    ordered_positions: bool = True

    @classmethod
    def from_env(cls) -> "SolverConfig":
        return cls(
            prune_per_attribute=_env_flag("ZEBRA_PRUNE_PER_ATTRIBUTE", True),
            ordered_positions=_env_flag("ZEBRA_ORDERED_POSITIONS", True),
        )


@dataclass(frozen=True)
class SearchState:
    houses: Houses = ()
    remaining: Remaining = field(default_factory=lambda: dict(DOMAINS))

    @property
    def depth(self) -> int:
        return len(self.houses)

    def is_complete(self) -> bool:
        return self.depth == HOUSE_COUNT

    def extend(self, house: House) -> "SearchState":
        remaining = {
            attribute: tuple(v for v in values if v != getattr(house, attribute))
            for attribute, values in self.remaining.items()
        }
        return SearchState(houses=self.houses + (house,), remaining=remaining)


def initial_state() -> SearchState:
    return SearchState()


@dataclass(frozen=True)
class _Plan:
    # checks[i]: clues that become decidable once ATTRIBUTES[i] is set on the new house.
    checks: Tuple[Tuple[Constraint, ...], ...]
    ordered_positions: bool


def _build_plan(constraints: Sequence[Constraint], config: SolverConfig) -> _Plan:
    stages: List[List[Constraint]] = [[] for _ in ATTRIBUTES]
    for constraint in constraints:
        if config.prune_per_attribute:
            stage = max((ATTRIBUTES.index(a) for a in constraint.scope), default=0)
        else:
            stage = len(ATTRIBUTES) - 1
        stages[stage].append(constraint)
    return _Plan(
        checks=tuple(tuple(stage) for stage in stages),
        ordered_positions=config.ordered_positions,
    )


def _candidate_values(state: SearchState, attribute: str, plan: _Plan) -> Tuple[Any, ...]:
    values = state.remaining[attribute]
    if attribute == "position" and plan.ordered_positions:
        return values[:1]
    return values


def _search(
    state: SearchState,
    plan: _Plan,
    tracer: Tracer,
    sink: Optional[List[SearchState]] = None,
) -> Optional[SearchState]:
    if state.is_complete():
        tracer.log_solution_found(depth=state.depth)
        if sink is None:
            return state
        sink.append(state)
        return None

    result = _fill(state, {}, 0, plan, tracer, sink)
    if result is None:
        tracer.log_backtrack(depth=state.depth)
    return result


def _fill(
    state: SearchState,
    assigned: Dict[str, Any],
    stage: int,
    plan: _Plan,
    tracer: Tracer,
    sink: Optional[List[SearchState]],
) -> Optional[SearchState]:
    """Choose the value of ATTRIBUTES[stage] for the next house, then the rest."""
    if stage == len(ATTRIBUTES):
        house = House(**assigned)
        next_state = state.extend(house)
        tracer.log_place(house, depth=next_state.depth)
        return _search(next_state, plan, tracer, sink)

    attribute = ATTRIBUTES[stage]
    checks = plan.checks[stage]
    for value in _candidate_values(state, attribute, plan):
        trial = {**assigned, attribute: value}
        if checks:
            violated = first_violation(checks, state.houses + (House(**trial),))
            if violated is not None:
                tracer.log_prune(attribute, value, depth=state.depth, constraint=str(violated))
                continue

        result = _fill(state, trial, stage + 1, plan, tracer, sink)
        if result is not None:
            return result
    return None


def _by_position(houses: Houses) -> Houses:
    return tuple(sorted(houses, key=lambda house: house.position))


def search(
    constraints: Sequence[Constraint] = ZEBRA_CONSTRAINTS,
    config: Optional[SolverConfig] = None,
    tracer: Optional[Tracer] = None,
    state: Optional[SearchState] = None,
) -> Optional[SearchState]:
    """Return the first complete state that satisfies every constraint, or None."""
    tracer = tracer or get_tracer()
    plan = _build_plan(constraints, config or SolverConfig())
    return _search(state or initial_state(), plan, tracer)


def solve(
    constraints: Sequence[Constraint] = ZEBRA_CONSTRAINTS,
    config: Optional[SolverConfig] = None,
    tracer: Optional[Tracer] = None,
) -> Houses:
    """
    Solve the puzzle and return the five houses ordered by position.
    Raises NoSolutionError if the constraints admit no row at all.
    """
    constraints = tuple(constraints)
    final = search(constraints, config, tracer)
    if final is None:
        raise NoSolutionError(
            f"Search space exhausted: no row of {HOUSE_COUNT} houses satisfies "
            f"all {len(constraints)} constraints"
        )
    return _by_position(final.houses)


def enumerate_solutions(
    constraints: Sequence[Constraint] = ZEBRA_CONSTRAINTS,
    config: Optional[SolverConfig] = None,
    tracer: Optional[Tracer] = None,
) -> List[Houses]:
    """Walk the whole space and return every distinct satisfying row."""
    tracer = tracer or Tracer(enabled=False)
    plan = _build_plan(constraints, config or SolverConfig())
    found: List[SearchState] = []
    _search(initial_state(), plan, tracer, found)
    # Without ordered positions the same row is reached once per placement order.
    rows = dict.fromkeys(_by_position(state.houses) for state in found)
    return list(rows)
