# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Scalar limits of floating point dtypes. For complex dtypes the limits of the
underlying real element type are reported.
"""

from .backend import ArrayNamespace, DType, is_complex

_REAL_OF_COMPLEX = {"complex64": "float32", "complex128": "float64"}

def real_dtype(xp: ArrayNamespace, dtype: DType) -> DType:
    """Element type of a scalar type, e.g. float64 for complex128."""
    if not is_complex(xp, dtype):
        return dtype
    for cname, rname in _REAL_OF_COMPLEX.items():
        if dtype == getattr(xp, cname, None):
            return getattr(xp, rname)
    raise ValueError(f"Unsupported complex dtype {dtype}.")

def epsilon(xp: ArrayNamespace, dtype: DType) -> float:
    """Machine epsilon of the given dtype."""
    return float(xp.finfo(real_dtype(xp, dtype)).eps)

def smallest(xp: ArrayNamespace, dtype: DType) -> float:
    """Smallest positive normal number of the given dtype."""
    return float(xp.finfo(real_dtype(xp, dtype)).smallest_normal)
