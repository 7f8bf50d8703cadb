from .numeric import MinSetAlgebra, MaxSetAlgebra, MinAddAlgebra, MaxAddAlgebra, SumAddAlgebra, SumSetAlgebra, \
    SumAffineAlgebra
from .vector import VectorMinSetAlgebra, VectorMaxSetAlgebra, VectorSumAddAlgebra
from .callable_algebra import CallableAlgebra
