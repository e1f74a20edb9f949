# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the subset of the array API standard used by orthobasis."""

from typing import Any, Protocol, Self

Device = Any
DType = Any

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...
    @property
    def T(self) -> Self: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __matmul__(self, other: Self, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __float__(self) -> float: ...

class LinalgExtension[T: ArrayLike](Protocol):

    def qr(self, x: T, /, *, mode: str = "reduced") -> tuple[T, T]: ...
    def vector_norm(self, x: T, /, *, axis: Any = None, keepdims: bool = False, ord: Any = 2) -> T: ...
    def diagonal(self, x: T, /, *, offset: int = 0) -> T: ...

class FInfo(Protocol):
    eps: float
    smallest_normal: float
    dtype: DType

class ArrayNamespace[T: ArrayLike](Protocol):

    newaxis: None
    linalg: LinalgExtension[T]

    def asarray(self, obj: Any, /, *, dtype: DType | None = None, device: Device | None = None, copy: bool | None = None) -> T: ...
    def zeros(self, shape: int | tuple[int, ...], *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def eye(self, n_rows: int, n_cols: int | None = None, /, *, k: int = 0, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def conj(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def max(self, x: T, /, *, axis: Any = None, keepdims: bool = False) -> T: ...
    def sum(self, x: T, /, *, axis: Any = None, dtype: DType | None = None, keepdims: bool = False) -> T: ...
    def isdtype(self, dtype: DType, kind: Any) -> bool: ...
    def finfo(self, type: Any, /) -> FInfo: ...
    def __array_namespace_info__(self) -> Any: ...
