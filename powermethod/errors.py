# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

class InvalidArgumentError(ValueError):
    """Raised for degenerate input, e.g. a zero vector or mismatching dimensions."""

class NumericalDegeneracyError(ArithmeticError):
    """Raised if an intermediate vector has zero or non-finite norm."""
