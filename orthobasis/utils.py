# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from numbers import Integral

from .backend import ArrayLike, namespace_of_arrays, shape

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_index(msg: str, value: Any):
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{msg} must be an integer, got {value!r}")

def check_matrix(basis: ArrayLike) -> tuple[int, int]:
    if basis.ndim != 2:
        raise ValueError(f"Basis must be a two dimensional array, got {basis.ndim} dimension(s)")
    xp = namespace_of_arrays(basis)
    # in-place write-back into an integer array truncates
    if not xp.isdtype(basis.dtype, ("real floating", "complex floating")):
        raise ValueError(f"Basis must have a floating point dtype, got {basis.dtype}")
    nrows, ncols = shape(basis)
    return nrows, ncols
