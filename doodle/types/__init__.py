from typing import Union

from doodle.types.expr import Expr, Number, Boolean, String, List, Vector, Map, number_value
from doodle.types.symbol import Symbol, Keyword, to_symbol, to_keyword
from doodle.types.nil import Nil, NilType
from doodle.types.lambda_fn import Lambda
from doodle.types.key import (
    ExprKey, SymbolKey, KeywordKey, NumberKey, BooleanKey, StringKey,
    ListKey, VectorKey, MapKey, NilKey, NilKeyType, make_key, to_expr,
)
from doodle.types.frame import Frame
from doodle.types.bind import to_dictionary
from doodle.types.environment import Environment

# Closed unions for exhaustive matching by consumers
AnyExpr = Union[Symbol, Keyword, Number, Boolean, String, List, Vector, Map, NilType, Lambda]
AnyKey = Union[SymbolKey, KeywordKey, NumberKey, BooleanKey, StringKey, ListKey, VectorKey, MapKey, NilKeyType]

__all__ = [
    "Expr", "Symbol", "Keyword", "Number", "Boolean", "String", "List", "Vector", "Map",
    "Nil", "NilType", "Lambda", "number_value", "to_symbol", "to_keyword",
    "ExprKey", "SymbolKey", "KeywordKey", "NumberKey", "BooleanKey", "StringKey",
    "ListKey", "VectorKey", "MapKey", "NilKey", "NilKeyType", "make_key", "to_expr",
    "Frame", "to_dictionary", "Environment", "AnyExpr", "AnyKey",
]
