# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike
from .utils import check_index, check_matrix
from .columnnormalization import normalize_columns

def check_skip(basis: ArrayLike, skip: int) -> None:
    """
    Check that the number of leading columns to skip is not negative and
    leaves at least one column of the basis to be orthogonalized.
    """
    check_index("skip", skip)
    _, ncols = check_matrix(basis)
    if skip < 0:
        raise ValueError(f"skip must not be negative, got {skip}")
    if skip >= ncols:
        raise ValueError(f"skip must be smaller than the number of columns ({ncols}), got {skip}")

def treat_first_column(basis: ArrayLike, skip: int) -> int:
    """
    If no column is skipped, normalize the first column in place and treat it as locked.
    Returns the effective number of skipped columns.
    """
    if skip == 0:
        normalize_columns(basis, 0, 1)
        skip = 1
    return skip
