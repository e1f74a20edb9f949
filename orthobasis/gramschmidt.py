# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, adjoint, shape
from .columnnormalization import normalize_columns, reference_norms
from .skipboundary import check_skip, treat_first_column

def gs_orthogonalization(basis: ArrayLike, skip: int = 0) -> None:
    """
    Orthogonalize the basis with the classical Gram-Schmidt process. The projection of
    every column onto all columns to its left is removed in a single matrix operation.
    Cheaper to evaluate than modified Gram-Schmidt, but numerically weaker for
    ill-conditioned bases. The first skip columns are left untouched.
    """
    check_skip(basis, skip)
    skip = treat_first_column(basis, skip)

    for j in range(skip, shape(basis)[1]):
        reference = reference_norms(basis, j, j+1)
        left, col = basis[:, :j], basis[:, j]
        basis[:, j] = col - left @ (adjoint(left) @ col)
        normalize_columns(basis, j, j+1, reference)

class GramSchmidt:
    """Classical Gram-Schmidt orthogonalization."""

    def __call__[T: ArrayLike](self, basis: T, skip: int = 0, /) -> None:
        gs_orthogonalization(basis, skip)

    def __repr__(self) -> str:
        return "GramSchmidt()"
