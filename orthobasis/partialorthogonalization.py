# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, adjoint, shape
from .columnnormalization import normalize_columns, reference_norms
from .skipboundary import check_skip

def partial_orthogonalization(basis: ArrayLike, skip: int) -> None:
    """
    Orthogonalize the trailing columns against the first skip columns and normalize them.
    The trailing columns are assumed to be orthogonal among themselves already, this is
    neither checked nor restored. The leading columns are never modified and nothing
    happens if skip is zero.
    """
    check_skip(basis, skip)
    if skip == 0:
        return

    ncols = shape(basis)[1]
    reference = reference_norms(basis, skip, ncols)
    left, right = basis[:, :skip], basis[:, skip:]
    basis[:, skip:] = right - left @ (adjoint(left) @ right)
    normalize_columns(basis, skip, ncols, reference)

class PartialOrthogonalization:
    """
    Orthogonalization of the trailing columns against the locked leading columns only.
    """

    def __call__[T: ArrayLike](self, basis: T, skip: int, /) -> None:
        partial_orthogonalization(basis, skip)

    def __repr__(self) -> str:
        return "PartialOrthogonalization()"
