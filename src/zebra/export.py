"""Render a solved row as a header/rows grid or a pandas DataFrame, and write it out."""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from .model import ATTRIBUTES, House

# Grid columns after the leading "House" column.
COLUMNS: List[str] = [name.capitalize() for name in ATTRIBUTES if name != "position"]


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def to_grid(houses: Sequence[House]) -> Dict[str, Any]:
    header = ["House"] + COLUMNS
    rows: List[List[Any]] = []
    for house in sorted(houses, key=lambda h: h.position):
        row = [str(house.position)]
        for attr in ATTRIBUTES[1:]:
            row.append(_plain(getattr(house, attr)))
        rows.append(row)
    return {"header": header, "rows": rows}


def solution_frame(houses: Sequence[House]) -> pd.DataFrame:
    """One row per house, indexed by position."""
    grid = to_grid(houses)
    frame = pd.DataFrame(grid["rows"], columns=grid["header"])
    frame["House"] = frame["House"].astype(int)
    return frame.set_index("House")


def write_solution(houses: Sequence[House], output_path: Path) -> None:
    output_path = Path(output_path)
    frame = solution_frame(houses)
    suffix = output_path.suffix.lower()

    if suffix not in (".csv", ".json", ".parquet"):
        raise ValueError(f"Unsupported output format {output_path.suffix!r}; use .csv, .json or .parquet")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        frame.to_csv(output_path)
    elif suffix == ".json":
        frame.reset_index().to_json(output_path, orient="records", indent=2)
    else:
        # Requires pyarrow or fastparquet, as pandas does for any parquet I/O.
        frame.to_parquet(output_path)
