"""Utility module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import toml
from ml_collections import ConfigDict

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Sequence

    from numpy.typing import ArrayLike, NDArray


logger = logging.getLogger(__name__)


def load_config(path: Path) -> ConfigDict:
    """Load an operating trajectories config file.

    Args:
        path: Path to the config file.

    Returns:
        The configuration.
    """
    assert path.exists(), f"Configuration file not found: {path}"
    assert path.suffix == ".toml", f"Configuration file has to be a TOML file: {path}"

    with open(path, "r") as f:
        return ConfigDict(toml.load(f))


def as_vector(value: ArrayLike, dim: int | None = None, name: str = "vector") -> NDArray:
    """Copy `value` into a 1-D float vector and check its dimension.

    Args:
        value: Anything numpy can convert into a 1-D array.
        dim: The expected length, or None to accept any length.
        name: Name used in error messages.

    Returns:
        A fresh float64 array.
    """
    vec = np.array(value, dtype=float)
    if vec.ndim != 1:
        raise ValueError(f"{name} must be a 1-D vector, got array of shape {vec.shape}")
    if dim is not None and vec.shape[0] != dim:
        raise ValueError(f"{name} must have dimension {dim}, got {vec.shape[0]}")
    return vec


def readonly(vec: NDArray) -> NDArray:
    """Mark an array as read-only and return it."""
    vec.flags.writeable = False
    return vec


def stack_trajectories(
    time_trajectory: Sequence[float],
    state_trajectory: Sequence[NDArray],
    input_trajectory: Sequence[NDArray],
) -> tuple[NDArray, NDArray, NDArray]:
    """Stack trajectory lists into arrays of shape (N,), (N, nx) and (N, nu)."""
    assert len(time_trajectory) == len(state_trajectory) == len(input_trajectory), (
        "Trajectories must have the same length, got "
        f"{len(time_trajectory)}, {len(state_trajectory)}, {len(input_trajectory)}"
    )
    if len(time_trajectory) == 0:
        return np.zeros((0,)), np.zeros((0, 0)), np.zeros((0, 0))
    return (
        np.asarray(time_trajectory, dtype=float),
        np.stack(state_trajectory),
        np.stack(input_trajectory),
    )
