# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

from .backend import ArrayLike, namespace_of_arrays, column_norms, size, shape
from .options import get_options
from .typetraits import epsilon

class RankDeficiencyError(ValueError):
    """
    Raised in checked normalization mode, if a column of the basis is (numerically)
    linearly dependent on the columns it was orthogonalized against. The error is raised
    while the basis is processed in place, so the basis is left partly orthogonalized:
    columns before the offending one may already be rewritten, and the offending column
    may already be projected but not normalized.
    """

    #: Index of the offending column in the basis.
    column: int
    #: Norm of the column after the projections.
    norm: float
    #: Norm of the column before the orthogonalization.
    reference: float

    def __init__(self, column: int, norm: float, reference: float) -> None:
        self.column = column
        self.norm = norm
        self.reference = reference
        super().__init__(
            f"Column {column} is linearly dependent on the preceding columns "
            f"(residual norm {norm:.3e}, norm before orthogonalization {reference:.3e})")

def reference_norms[T: ArrayLike](basis: T, start: int, stop: int) -> Optional[T]:
    """Norms of the columns [start, stop) before orthogonalization. Only computed if rank checks are enabled."""
    xp = namespace_of_arrays(basis)
    if not get_options(xp).check_rank:
        return None
    return column_norms(basis[:, start:stop])

def check_residuals[T: ArrayLike](basis: T, start: int, residuals: T, reference: Optional[T]) -> None:
    """
    Raise a RankDeficiencyError for the first column whose residual norm is below
    the cutoff relative to its reference norm. Does nothing unless rank checks are enabled.
    """
    xp = namespace_of_arrays(basis)
    opts = get_options(xp)
    if not opts.check_rank:
        return
    if reference is None:
        reference = residuals
    cutoff = opts.cutoff
    if cutoff is None:
        cutoff = epsilon(xp, basis.dtype) * shape(basis)[0]
    for i in range(size(residuals)):
        norm, ref = float(residuals[i]), float(reference[i])
        if norm <= cutoff * ref:
            raise RankDeficiencyError(start + i, norm, ref)

def normalize_columns[T: ArrayLike](basis: T, start: int, stop: int, reference: Optional[T] = None) -> None:
    """Divide each of the columns [start, stop) of the basis by its euclidean norm, in place."""
    xp = namespace_of_arrays(basis)
    block = basis[:, start:stop]
    norms = column_norms(block)
    check_residuals(basis, start, norms, reference)
    basis[:, start:stop] = block / norms[xp.newaxis, :]
