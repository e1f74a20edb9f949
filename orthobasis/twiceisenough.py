# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike
from .gramschmidt import gs_orthogonalization

def twice_is_enough_orthogonalization(basis: ArrayLike, skip: int = 0) -> None:
    """
    Classical Gram-Schmidt applied twice. The second pass removes most of the loss of
    orthogonality left by the first one.
    """
    gs_orthogonalization(basis, skip)
    gs_orthogonalization(basis, skip)

class TwiceIsEnough:
    """Twice-is-enough classical Gram-Schmidt orthogonalization."""

    def __call__[T: ArrayLike](self, basis: T, skip: int = 0, /) -> None:
        twice_is_enough_orthogonalization(basis, skip)

    def __repr__(self) -> str:
        return "TwiceIsEnough()"
