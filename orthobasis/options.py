# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
import threading

from .backend import ArrayNamespace
from .utils import check_pos

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace):
        self.key = (namespace, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class NormalizationOptions(Options):
    """
    Context manager for the column normalization of all orthogonalization routines.
    By default columns are divided by whatever norm remains after the projections,
    even if it is (close to) zero. With check_rank=True a column whose residual norm
    drops to cutoff times its norm before orthogonalization raises a RankDeficiencyError.
    The basis is not restored in that case and stays partly processed.
    """

    #: Report linearly dependent columns instead of normalizing them.
    check_rank: bool
    #: Relative cutoff for the residual norm. None uses epsilon of the dtype times the number of rows.
    cutoff: Optional[float]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            check_rank: bool = False,
            cutoff: Optional[float] = None):
        if cutoff is not None:
            check_pos("cutoff", cutoff)
        self.check_rank = check_rank
        self.cutoff = cutoff
        super().__init__(namespace)

    def __repr__(self) -> str:
        return f"NormalizationOptions(check_rank={self.check_rank}, cutoff={self.cutoff})"

_opts: dict[Any, NormalizationOptions] = {}

def get_options(namespace: ArrayNamespace) -> NormalizationOptions:
    global _opts
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key]
    # unchecked normalization unless configured otherwise
    return NormalizationOptions(namespace=namespace)

def set_options(opts: NormalizationOptions) -> None:
    global _opts
    _opts[opts.key] = opts
