# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, inner, shape
from .columnnormalization import normalize_columns, reference_norms
from .skipboundary import check_skip, treat_first_column

def mgs_orthogonalization(basis: ArrayLike, skip: int = 0) -> None:
    """
    Orthogonalize the basis with the modified Gram-Schmidt process. Column by column,
    the projections onto all preceding columns are removed one at a time, each computed
    from the already updated column. The first skip columns are left untouched.
    """
    check_skip(basis, skip)
    skip = treat_first_column(basis, skip)

    for k in range(skip, shape(basis)[1]):
        reference = reference_norms(basis, k, k+1)
        for j in range(k):
            coeff = inner(basis[:, j], basis[:, k])
            basis[:, k] = basis[:, k] - coeff * basis[:, j]
        normalize_columns(basis, k, k+1, reference)

class ModifiedGramSchmidt:
    """Modified Gram-Schmidt orthogonalization."""

    def __call__[T: ArrayLike](self, basis: T, skip: int = 0, /) -> None:
        mgs_orthogonalization(basis, skip)

    def __repr__(self) -> str:
        return "ModifiedGramSchmidt()"
