# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from .powermethod import PowerMethod
from .poweriteration import PowerIteration, PowerIterationResult, power_iteration
from .errors import InvalidArgumentError, NumericalDegeneracyError

logging.getLogger(__name__).addHandler(logging.NullHandler())
