# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays, check_linalg, shape
from .columnnormalization import reference_norms, check_residuals
from .skipboundary import check_skip
from .utils import check_matrix

def qr_orthogonalization(basis: ArrayLike) -> None:
    """
    Replace the basis by the orthogonal factor :math:`Q` of its Householder QR
    decomposition, which spans the same column space. The result is orthonormal to
    machine precision independent of the condition of the input. For a wide basis with
    fewer rows than columns only the leading rows-many columns can be orthonormal, the
    remaining columns are set to zero.
    """
    check_matrix(basis)
    _qr_columns(basis, 0)

def _qr_columns[T: ArrayLike](basis: T, start: int) -> None:
    xp = namespace_of_arrays(basis)
    check_linalg(xp)
    nrows, ncols = shape(basis)
    width = min(nrows, ncols - start)

    reference = reference_norms(basis, start, start + width)
    q, r = xp.linalg.qr(basis[:, start:], mode='reduced')
    if reference is not None:
        diag = xp.abs(xp.linalg.diagonal(r))
        check_residuals(basis, start, diag, reference)

    basis[:, start:start + width] = q[:, :width]
    if start + width < ncols:
        basis[:, start + width:] = 0

class QROrthogonalization:
    """
    Householder QR re-orthogonalization of the whole basis. The most robust but also the
    most expensive strategy. The number of skipped columns is validated, but the locked
    columns are rotated along, which reproduces them up to their sign.
    """

    def __call__[T: ArrayLike](self, basis: T, skip: int = 0, /) -> None:
        check_skip(basis, skip)
        qr_orthogonalization(basis)

    def __repr__(self) -> str:
        return "QROrthogonalization()"
