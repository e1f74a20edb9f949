# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike
from .skipboundary import check_skip
from .partialorthogonalization import partial_orthogonalization
from .qrorthogonalization import _qr_columns

def jens_wehner_orthogonalization(basis: ArrayLike, skip: int = 0) -> None:
    """
    Hybrid orthogonalization after Jens Wehner. The trailing columns are first
    orthogonalized against the first skip columns with a partial orthogonalization and
    then against each other with a Householder QR of the trailing block only. Afterwards
    the whole basis is orthonormal, at a cost dominated by the QR of the (usually small)
    trailing block. Without skipped columns the whole basis is QR re-orthogonalized.
    """
    check_skip(basis, skip)
    partial_orthogonalization(basis, skip)
    _qr_columns(basis, skip)

class JensWehner:
    """Partial orthogonalization followed by a QR of the trailing block."""

    def __call__[T: ArrayLike](self, basis: T, skip: int = 0, /) -> None:
        jens_wehner_orthogonalization(basis, skip)

    def __repr__(self) -> str:
        return "JensWehner()"
