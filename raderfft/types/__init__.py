from .arithmetic import (cq32, FIXED_FRACBITS, FloatArithmetic,
                         FixedPointArithmetic, get_arithmetic, precision, kind,
                         complex_same_precision_as, zeros, to_fixed,
                         from_fixed)
from numpy import float32, float64, complex64, complex128
