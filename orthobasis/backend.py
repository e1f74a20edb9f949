# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import device
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except Exception:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def check_linalg(xp: ArrayNamespace) -> None:
    if not hasattr(xp, "linalg"):
        raise NotImplementedError(
            f"Extension linalg is missing from namespace {xp}.")

def is_complex(xp: ArrayNamespace, dtype: DType) -> bool:
    return xp.isdtype(dtype, "complex floating")

def adjoint[T: ArrayLike](mat: T) -> T:
    """Conjugate transpose of a matrix, a plain transpose for real dtypes."""
    xp = namespace_of_arrays(mat)
    if is_complex(xp, mat.dtype):
        return xp.conj(mat).T
    return mat.T

def inner[T: ArrayLike](lhs: T, rhs: T) -> T:
    """Hermitian inner product of two vectors, conjugating the left operand."""
    xp = namespace_of_arrays(lhs, rhs)
    if is_complex(xp, lhs.dtype):
        return xp.sum(xp.conj(lhs) * rhs)
    return xp.sum(lhs * rhs)

def column_norms[T: ArrayLike](block: T) -> T:
    xp = namespace_of_arrays(block)
    check_linalg(xp)
    return xp.linalg.vector_norm(block, axis=0)
