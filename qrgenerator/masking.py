"""The eight data mask patterns and the penalty score used to choose one."""

import logging
from functools import lru_cache

import numpy as np

from .qrtypes import EccLevel, Mask

logger = logging.getLogger(__name__)

PENALTY_N1 = 3
PENALTY_N2 = 3
PENALTY_N3 = 40
PENALTY_N4 = 10

MASK_FORMULAS = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i + j) % 2 + (i * j) % 3) % 2 == 0,
)


@lru_cache(maxsize=None)
def mask_pattern(mask: int, size: int) -> np.ndarray:
    """Boolean size x size array, True where the mask inverts a module."""
    i, j = np.indices((size, size))
    pattern = MASK_FORMULAS[Mask(mask)](i, j)
    pattern.setflags(write=False)
    return pattern


def apply_mask(matrix, mask: int) -> None:
    """XOR the mask into every non-function module. Applying it twice is a no-op."""
    matrix.modules ^= mask_pattern(mask, matrix.size) & ~matrix.is_function


#%% Penalty rules

def _run_lengths(line: np.ndarray) -> np.ndarray:
    edges = np.flatnonzero(line[1:] != line[:-1]) + 1
    return np.diff(np.concatenate(([0], edges, [line.size])))


def penalty_runs(grid: np.ndarray) -> int:
    """Rule 1: each run of 5+ same-coloured modules scores 3 + (length - 5)."""
    penalty = 0
    for line in list(grid) + list(grid.T):
        runs = _run_lengths(line)
        long_runs = runs[runs >= 5]
        penalty += int(np.sum(long_runs - 5 + PENALTY_N1))
    return penalty


def penalty_blocks(grid: np.ndarray) -> int:
    """Rule 2: 3 points for every 2x2 block of one colour."""
    top_left = grid[:-1, :-1]
    same = (top_left == grid[1:, :-1]) & (top_left == grid[:-1, 1:]) & (top_left == grid[1:, 1:])
    return int(np.count_nonzero(same)) * PENALTY_N2


def penalty_finder_like(grid: np.ndarray) -> int:
    """Rule 3: 40 points for every 1:1:3:1:1 finder-like pattern in a row or column.

    Runs of n dark, n light, 3n dark, n light, n dark modules count when
    there are at least 4n light modules on one side and n on the other. Each
    qualifying side is counted. The area outside the symbol counts as light.
    """
    count = 0
    for line in list(grid) + list(grid.T):
        count += _finder_like_count(np.asarray(line, dtype=np.bool_))
    return count * PENALTY_N3


def _finder_like_count(line: np.ndarray) -> int:
    # run lengths alternating light, dark, ..., light; border light is added to the ends
    runs = _run_lengths(line).tolist()
    if line[0]:
        runs.insert(0, 0)
    if line[-1]:
        runs.append(0)
    runs[0] += line.size
    runs[-1] += line.size

    count = 0
    for k in range(3, len(runs) - 3, 2):
        n = runs[k - 2]
        if not (n > 0 and runs[k - 1] == n and runs[k] == 3 * n and runs[k + 1] == n and runs[k + 2] == n):
            continue
        before, after = runs[k - 3], runs[k + 3]
        count += (before >= 4 * n and after >= n) + (after >= 4 * n and before >= n)
    return count


def penalty_balance(grid: np.ndarray) -> int:
    """Rule 4: 10 points for each full 5% the dark proportion deviates from 50%."""
    total = grid.size
    dark = int(np.count_nonzero(grid))
    k = abs(dark * 20 - total * 10) // total
    return k * PENALTY_N4


def penalty_score(grid: np.ndarray) -> int:
    return penalty_runs(grid) + penalty_blocks(grid) + penalty_finder_like(grid) + penalty_balance(grid)


def choose_mask(matrix, ecl: EccLevel) -> Mask:
    """Try all eight masks in place and return the one with the lowest penalty.

    Each candidate is applied together with its format bits, scored and then
    undone by applying it again. Ties go to the lowest mask index.
    """
    best_mask = None
    best_score = None
    for m in range(8):
        apply_mask(matrix, m)
        matrix.draw_format_bits(ecl, m)
        score = penalty_score(matrix.modules)
        logger.debug("Mask %d penalty %d", m, score)
        if best_score is None or score < best_score:
            best_score = score
            best_mask = m
        apply_mask(matrix, m)
    return Mask(best_mask)
