"""Pattern weights for single-ply move scoring (open threes, fours, etc.)."""

from pathlib import Path
import yaml

try:
    from engine.rules import AXES
except ImportError:
    from Gomoku_Engine.engine.rules import AXES

# Perspective strings: 1 = own stone, 2 = opponent stone, 0 = empty.
DEFAULT_PATTERNS = [
    ("11111", 1000000),  # five
    ("011110", 10000),   # open four
    ("211110", 5000),    # blocked four
    ("011112", 5000),
    ("01110", 500),      # open three
    ("010110", 500),
    ("011010", 500),
    ("211100", 100),     # blocked three
    ("001112", 100),
    ("001100", 10),      # open two
    ("01010", 10),
    ("211000", 5),       # blocked two
    ("000112", 5),
]


def load_patterns(path="config/patterns.yaml"):
    """Load pattern weights from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from the repo root (e.g. `python -m Gomoku_Engine.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_PATTERNS

    loaded = []
    for item in data.get("patterns", []):
        pat = item.get("pattern")
        score = item.get("score", 0)
        if not pat:
            continue
        if isinstance(pat, list):
            for p in pat:
                loaded.append((str(p), score))
        else:
            loaded.append((str(pat), score))
    return loaded or DEFAULT_PATTERNS


def score_lines(lines, color, patterns=None):
    """Score a collection of lines for `color` (own patterns minus opponent patterns)."""
    patterns = patterns or DEFAULT_PATTERNS
    total = 0
    for line in lines:
        line_str_self, line_str_opp = _line_views(line, color)
        for pat, val in patterns:
            total += line_str_self.count(pat) * val
            total -= line_str_opp.count(pat) * val
    return total


def _line_views(line, color):
    """Return two strings: perspective of self and opponent."""
    opp = -color
    translate_self = {color: "1", opp: "2", 0: "0"}
    translate_opp = {color: "2", opp: "1", 0: "0"}
    to_self = "".join(translate_self[v] for v in line)
    to_opp = "".join(translate_opp[v] for v in line)
    return to_self, to_opp


def _line_with_override(board, row, col, dr, dc, override=None):
    """
    Collect the full board line through (row, col) along (dr, dc). If override is not
    None, the cell at (row, col) is replaced with that value in the returned line.
    """
    line = []
    r, c = row, col
    while board.in_bounds(r - dr, c - dc):
        r -= dr
        c -= dc
    while board.in_bounds(r, c):
        if r == row and c == col and override is not None:
            val = override
        else:
            val = board.cells[r][c]
        line.append(int(val))
        r += dr
        c += dc
    return line


def lines_through(board, row, col, override=None):
    """Return the four lines (row/col/diagonals) passing through (row, col)."""
    return [_line_with_override(board, row, col, dr, dc, override=override) for dr, dc in AXES]


def placement_delta(board, position, color, patterns=None):
    """
    Score change for `color` if it played on the empty `position`. Only the four lines
    through the cell can change, so the rest of the board is never rescanned.
    """
    row, col = position
    color = int(color)
    lines_after = lines_through(board, row, col, override=color)
    lines_before = lines_through(board, row, col, override=0)
    return score_lines(lines_after, color, patterns) - score_lines(lines_before, color, patterns)
