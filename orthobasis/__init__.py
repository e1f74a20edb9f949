# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .orthobasis import OrthoBasis
from .skipboundary import check_skip, treat_first_column
from .qrorthogonalization import qr_orthogonalization
from .modifiedgramschmidt import mgs_orthogonalization
from .gramschmidt import gs_orthogonalization
from .twiceisenough import twice_is_enough_orthogonalization
from .partialorthogonalization import partial_orthogonalization
from .jenswehner import jens_wehner_orthogonalization
from .columnnormalization import RankDeficiencyError
from .diagnostics import orthogonality_error, prefix_error, span_residual
from .typetraits import epsilon, smallest, real_dtype
