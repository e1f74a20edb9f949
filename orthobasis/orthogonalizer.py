# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from .backend import ArrayLike

class Orthogonalizer(Protocol):
    """Protocol for an in-place orthogonalization strategy."""

    def __call__(self, basis: ArrayLike, skip: int, /) -> None:
        """
        Orthogonalize the columns basis[:, skip:] against the leading skip columns
        and against each other. The leading columns are left untouched, except by the
        QR strategy, which rotates the whole basis and reproduces them up to sign.
        """
        ...
