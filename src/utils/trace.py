"""Tracing module: logs zebra search steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'place', 'prune', 'backtrack', 'solution_found'
    depth: Optional[int] = None  # Number of houses committed
    attribute: Optional[str] = None
    value: Optional[Any] = None
    house: Optional[str] = None
    constraint: Optional[str] = None
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **details: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **details,
        ))

    def log_place(self, house: Any, depth: int):
        """Log a house committed to the row."""
        if not self.enabled:
            return
        self._record('place', depth=depth, house=str(house))

    def log_prune(self, attribute: str, value: Any, depth: int, constraint: str):
        """Log a candidate value rejected by a clue."""
        if not self.enabled:
            return
        self._record(
            'prune',
            depth=depth,
            attribute=attribute,
            value=getattr(value, "value", value),
            constraint=constraint,
        )

    def log_backtrack(self, depth: int, reason: str = "No consistent house"):
        """Log a backtrack event."""
        if not self.enabled:
            return
        self._record('backtrack', depth=depth, reason=reason)

    def log_solution_found(self, depth: int):
        """Log when a solution is found."""
        if not self.enabled:
            return
        self._record('solution_found', depth=depth)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'depth', 'attribute',
            'value', 'house', 'constraint', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_placements': action_counts.get('place', 0),
            'num_prunes': action_counts.get('prune', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
