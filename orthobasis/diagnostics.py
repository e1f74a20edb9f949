# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Measures for the quality of an orthonormal basis."""

from .backend import ArrayLike, namespace_of_arrays, adjoint, check_linalg, column_norms, shape, device
from .utils import check_matrix

def orthogonality_error(basis: ArrayLike, start: int = 0) -> float:
    """Largest entry of :math:`|S^H S - I|` for the columns S=basis[:, start:]."""
    check_matrix(basis)
    xp = namespace_of_arrays(basis)
    cols = basis[:, start:]
    ncols = shape(cols)[1]
    if ncols == 0:
        return 0.0
    gram = adjoint(cols) @ cols
    eye = xp.eye(ncols, dtype=basis.dtype, device=device(basis))
    return float(xp.max(xp.abs(gram - eye)))

def prefix_error(basis: ArrayLike, skip: int) -> float:
    """Largest entry of :math:`|P^H S|` for the leading columns P and the trailing columns S."""
    check_matrix(basis)
    xp = namespace_of_arrays(basis)
    if skip == 0 or skip >= shape(basis)[1]:
        return 0.0
    left, right = basis[:, :skip], basis[:, skip:]
    return float(xp.max(xp.abs(adjoint(left) @ right)))

def span_residual(reference: ArrayLike, basis: ArrayLike) -> float:
    """
    Largest norm of the residual after projecting the columns of basis onto the column
    space of reference. It vanishes if the basis lies in the span of reference.
    """
    check_matrix(reference)
    check_matrix(basis)
    xp = namespace_of_arrays(reference, basis)
    check_linalg(xp)
    q, _ = xp.linalg.qr(reference, mode='reduced')
    residual = basis - q @ (adjoint(q) @ basis)
    return float(xp.max(column_norms(residual)))
