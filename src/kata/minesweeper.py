"""Fill a minesweeper board with the number of mines around each cell."""

from typing import List, Optional

MINE = "*"

_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _cell(board: List[str], x: int, y: int) -> Optional[str]:
    if y < 0 or y >= len(board):
        return None
    row = board[y]
    if x < 0 or x >= len(row):
        return None
    return row[x]


def annotate(board: List[str]) -> List[str]:
    """Mines stay as '*'; other cells show their mine count, or a space for zero."""
    annotated: List[str] = []
    for y, row in enumerate(board):
        cells = []
        for x, value in enumerate(row):
            if value == MINE:
                cells.append(MINE)
                continue
            count = sum(1 for dx, dy in _OFFSETS if _cell(board, x + dx, y + dy) == MINE)
            cells.append(str(count) if count else " ")
        annotated.append("".join(cells))
    return annotated
