from schemelet.types.null import Null, NullType
from schemelet.types.environment import Environment
from schemelet.types.procedure import Procedure, PrimitiveProcedure

__all__ = ["Null", "NullType", "Environment", "Procedure", "PrimitiveProcedure"]
