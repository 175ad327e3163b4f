# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of powermethod."""

from .linearoperator import LinearOperator
from .denseoperator import DenseOperator
from .tridiagonaloperator import TridiagonalOperator
from .averagingoperator import AveragingOperator
from .callableoperator import CallableOperator

from .poweriteration import PowerIteration, PowerIterationResult
from .errors import InvalidArgumentError, NumericalDegeneracyError

from .options import Options, IterationOptions, PrecisionOptions, OptionType

from .powermethod import PowerMethod
