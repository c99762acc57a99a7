from __future__ import annotations

from protocol import MoveSet, Outcome, mirror

CORNER_LABEL = "Moves"

OUTCOME_LABELS: dict[Outcome, str] = {
    "win": "Win",
    "lose": "Lose",
    "draw": "Draw",
}


def build_grid(moves: MoveSet) -> list[list[str]]:
    """Build the help grid: header row and column are move names, cell (i, j)
    is the result of row move i against column move j from the row's side.
    """
    n = len(moves)
    outcomes: list[list[Outcome]] = [["draw"] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            result = moves.outcome(i, j)
            outcomes[i][j] = result
            outcomes[j][i] = mirror(result)

    grid = [[CORNER_LABEL, *moves]]
    for i, name in enumerate(moves):
        grid.append([name, *(OUTCOME_LABELS[o] for o in outcomes[i])])
    return grid


def format_table(grid: list[list[str]]) -> str:
    if not grid:
        return ""

    widths = [max(len(row[col]) for row in grid) for col in range(len(grid[0]))]
    lines = ["| " + " | ".join(_center(cell, widths[col]) for col, cell in enumerate(row)) + " |" for row in grid]

    border = "".join(ch if ch == "|" else "-" for ch in lines[0])
    return "\n".join([border, lines[0], border, *lines[1:], border])


def _center(text: str, width: int) -> str:
    # Odd leftover space goes to the right.
    spare = width - len(text)
    return " " * (spare // 2) + text + " " * (spare - spare // 2)
