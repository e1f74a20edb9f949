# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of orthobasis."""

from .array_namespace import ArrayLike, ArrayNamespace
from .orthogonalizer import Orthogonalizer
from .qrorthogonalization import QROrthogonalization
from .modifiedgramschmidt import ModifiedGramSchmidt
from .gramschmidt import GramSchmidt
from .twiceisenough import TwiceIsEnough
from .partialorthogonalization import PartialOrthogonalization
from .jenswehner import JensWehner

from .columnnormalization import RankDeficiencyError
from .options import Options, NormalizationOptions

from .orthobasis import OrthoBasis
