"""
Core math modules для matcalc

Численные алгоритмы над Matrix: арифметика, minor, определитель,
обращение и классификация разреженности.
"""

# Numerical Safeguards
from matcalc.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_DETERMINANT,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT,
    EPS_ZERO,
    SPARSITY_THRESHOLD,
    # Comparisons
    is_close,
    is_near_zero,
    is_valid_float,
    matrices_close,
    # Validation
    validate_in_range,
    validate_positive,
)

# Tracing
from matcalc.core.math.tracing import (
    LoggingObserver,
    RecordingObserver,
    TraceEvent,
    TraceEventKind,
    TraceObserver,
)

# Arithmetic
from matcalc.core.math.arithmetic import (
    add,
    multiply,
    scalar_multiply,
    subtract,
    transpose,
)

# Minor / Determinant / Inverse / Sparsity
from matcalc.core.math.minor import minor
from matcalc.core.math.determinant import cofactor, determinant, laplace_expansion
from matcalc.core.math.inverse import invert
from matcalc.core.math.sparsity import is_sparse, zero_fraction

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_DETERMINANT",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT",
    "EPS_ZERO",
    "SPARSITY_THRESHOLD",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_near_zero",
    "is_valid_float",
    "matrices_close",
    # Numerical Safeguards — Validation
    "validate_in_range",
    "validate_positive",
    # Tracing
    "LoggingObserver",
    "RecordingObserver",
    "TraceEvent",
    "TraceEventKind",
    "TraceObserver",
    # Arithmetic
    "add",
    "multiply",
    "scalar_multiply",
    "subtract",
    "transpose",
    # Minor / Determinant
    "minor",
    "cofactor",
    "determinant",
    "laplace_expansion",
    # Inverse
    "invert",
    # Sparsity
    "is_sparse",
    "zero_fraction",
]
