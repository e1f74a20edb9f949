# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass

from .backend import ArrayNamespace, DType, get_namespace, check_linalg
from .typetraits import epsilon as _epsilon, smallest as _smallest, real_dtype as _real_dtype
from .options import NormalizationOptions, set_options, get_options

from .skipboundary import check_skip, treat_first_column
from .qrorthogonalization import QROrthogonalization, qr_orthogonalization
from .modifiedgramschmidt import ModifiedGramSchmidt, mgs_orthogonalization
from .gramschmidt import GramSchmidt, gs_orthogonalization
from .twiceisenough import TwiceIsEnough, twice_is_enough_orthogonalization
from .partialorthogonalization import PartialOrthogonalization, partial_orthogonalization
from .jenswehner import JensWehner, jens_wehner_orthogonalization
from .diagnostics import orthogonality_error, prefix_error, span_residual

@dataclass(frozen=True)
class OrthoBasis[NDArray: Any]:
    """
    Orthogonalization routines bound to an array namespace. All routines work in place
    on a two dimensional basis, whose columns are the basis vectors.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        check_linalg(self.namespace)
        set_options(self.normalization())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def basis(self, data: Any, dtype: Optional[DType] = None) -> NDArray:
        """
        Writable copy of the given data as a basis. Integer data is converted to the
        default floating point dtype.
        """
        xp = self.namespace
        arr = xp.asarray(data, dtype=dtype, copy=True)
        if dtype is None and not xp.isdtype(arr.dtype, ("real floating", "complex floating")):
            arr = xp.asarray(arr, dtype=xp.float64)
        if arr.ndim != 2:
            raise ValueError(f"Basis must be a two dimensional array, got {arr.ndim} dimension(s)")
        return arr

    def epsilon(self, dtype: DType) -> float:
        """Machine epsilon of a real or complex dtype."""
        return _epsilon(self.namespace, dtype)

    def smallest(self, dtype: DType) -> float:
        """Smallest positive normal number of a real or complex dtype."""
        return _smallest(self.namespace, dtype)

    def real_dtype(self, dtype: DType) -> DType:
        """Real element type of a dtype."""
        return _real_dtype(self.namespace, dtype)

    #-------------------------------------------------------------------------------------------------
    # orthogonalization

    def check_skip(self, basis: NDArray, skip: int) -> None:
        """
        Raise a ValueError unless 0 <= skip < number of columns.
        """
        check_skip(basis, skip)

    def treat_first_column(self, basis: NDArray, skip: int) -> int:
        """
        Normalize the first column if skip is zero and return the effective number of skipped columns.
        """
        return treat_first_column(basis, skip)

    def qr(self, basis: NDArray) -> None:
        """
        Replace the basis by the orthogonal factor of its Householder QR decomposition.
        """
        qr_orthogonalization(basis)

    def mgs(self, basis: NDArray, skip: int = 0) -> None:
        """
        Modified Gram-Schmidt orthogonalization of the columns basis[:, skip:].
        """
        mgs_orthogonalization(basis, skip)

    def gs(self, basis: NDArray, skip: int = 0) -> None:
        """
        Classical Gram-Schmidt orthogonalization of the columns basis[:, skip:].
        """
        gs_orthogonalization(basis, skip)

    def twice_is_enough(self, basis: NDArray, skip: int = 0) -> None:
        """
        Classical Gram-Schmidt orthogonalization applied twice.
        """
        twice_is_enough_orthogonalization(basis, skip)

    def partial(self, basis: NDArray, skip: int) -> None:
        """
        Orthogonalize the already orthonormal columns basis[:, skip:] against the first skip columns.
        """
        partial_orthogonalization(basis, skip)

    def jens_wehner(self, basis: NDArray, skip: int = 0) -> None:
        """
        Partial orthogonalization against the first skip columns, followed by a QR of the
        trailing columns.
        """
        jens_wehner_orthogonalization(basis, skip)

    #-------------------------------------------------------------------------------------------------
    # strategies

    def qr_orthogonalization(self) -> QROrthogonalization:
        """Householder QR strategy."""
        return QROrthogonalization()

    def modified_gram_schmidt(self) -> ModifiedGramSchmidt:
        """Modified Gram-Schmidt strategy."""
        return ModifiedGramSchmidt()

    def gram_schmidt(self) -> GramSchmidt:
        """Classical Gram-Schmidt strategy."""
        return GramSchmidt()

    def twice_is_enough_gram_schmidt(self) -> TwiceIsEnough:
        """Twice-is-enough classical Gram-Schmidt strategy."""
        return TwiceIsEnough()

    def partial_orthogonalization(self) -> PartialOrthogonalization:
        """Partial orthogonalization strategy."""
        return PartialOrthogonalization()

    def jens_wehner_orthogonalization(self) -> JensWehner:
        """Hybrid partial and QR strategy."""
        return JensWehner()

    #-------------------------------------------------------------------------------------------------
    # diagnostics

    def orthogonality_error(self, basis: NDArray, start: int = 0) -> float:
        """Largest deviation of the columns basis[:, start:] from orthonormality."""
        return orthogonality_error(basis, start)

    def prefix_error(self, basis: NDArray, skip: int) -> float:
        """Largest overlap between the first skip columns and the remaining columns."""
        return prefix_error(basis, skip)

    def span_residual(self, reference: NDArray, basis: NDArray) -> float:
        """Largest residual of the columns of basis after projection onto the span of reference."""
        return span_residual(reference, basis)

    #-------------------------------------------------------------------------------------------------
    # options

    def normalization(
            self, *,
            check_rank: bool = False,
            cutoff: Optional[float] = None
            ) -> NormalizationOptions:
        """
        Context manager for the column normalization. With check_rank=True, columns that are
        linearly dependent on the columns they are orthogonalized against raise a
        RankDeficiencyError instead of being normalized.
        """
        return NormalizationOptions(namespace=self.namespace, check_rank=check_rank, cutoff=cutoff)

    def set_options(self, options: NormalizationOptions) -> None:
        """
        Set the normalization options for the current thread.
        """
        set_options(options)

    def get_options(self) -> NormalizationOptions:
        """
        Get the normalization options of the current thread.
        """
        return get_options(self.namespace)
