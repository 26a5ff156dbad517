"""Random terrain generation helpers."""

from __future__ import annotations

from random import Random
from typing import Iterable

from ..core.coordinate import Coordinate


def white_noise(width: int, height: int, rng: Random) -> list[list[float]]:
    """Return ``height`` × ``width`` grid of random floats in ``[0, 1)``.

    Values are drawn column by column (``x`` outer, ``y`` inner).
    """

    columns = [[rng.random() for _ in range(height)] for _ in range(width)]
    return [[columns[x][y] for x in range(width)] for y in range(height)]


def threshold_mask(
    data: list[list[float]], threshold: float
) -> list[list[bool]]:
    """Return boolean grid where ``True`` indicates ``value < threshold``."""

    mask: list[list[bool]] = []
    for row in data:
        mask.append([value < threshold for value in row])
    return mask


def random_mud(
    width: int,
    height: int,
    probability: float,
    rng: Random | None = None,
    exclude: Iterable[Coordinate] = (),
) -> frozenset[Coordinate]:
    """Return the cells marked as mud, each with chance ``probability``.

    Parameters
    ----------
    width, height:
        Grid dimensions.
    probability:
        Chance in ``[0, 1]`` that a cell becomes mud.
    rng:
        Source of randomness. Pass a seeded :class:`random.Random` for
        repeatable maps; ``None`` uses a freshly seeded one.
    exclude:
        Cells that are never marked, typically start and goal.
    """

    if not 0.0 <= probability <= 1.0:
        raise ValueError("probability must be within [0, 1]")
    rng = rng if rng is not None else Random()
    skip = set(exclude)
    mask = threshold_mask(white_noise(width, height, rng), probability)
    return frozenset(
        Coordinate(x, y)
        for y, row in enumerate(mask)
        for x, is_mud in enumerate(row)
        if is_mud and Coordinate(x, y) not in skip
    )


__all__ = ["white_noise", "threshold_mask", "random_mud"]
