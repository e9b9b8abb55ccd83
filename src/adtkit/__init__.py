"""adtkit: small algebraic data types for Python 3.13+.

Option, Either, Result, Maybe and Pair, each with constructors, guards,
combinators, extraction and combination helpers.

Flat imports (types and constructors):
    from adtkit import Some, Nothing, Ok, Err, Left, Right, Pair

Namespace imports (one module per type, operations as free functions):
    from adtkit import option, either, result, maybe, pair

    option.map(option.from_nullable(x), str)
    result.fold(r, on_err=..., on_ok=...)
    pair.map_first(pair.pair(1, "a"), str)
"""

from adtkit import aio, config, either, maybe, option, pair, result
from adtkit.decorators import safe, safe_async
from adtkit.either import Either, Left, Right, left, right
from adtkit.errors import UnwrapError
from adtkit.maybe import Maybe, just, nothing
from adtkit.option import Nothing, NothingType, Option, Some, none, some
from adtkit.pair import Pair, fst, snd
from adtkit.result import Err, Ok, Result, err, ok

__all__ = [
    "Either",
    "Err",
    "Left",
    "Maybe",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Pair",
    "Result",
    "Right",
    "Some",
    "UnwrapError",
    "aio",
    "config",
    "either",
    "err",
    "fst",
    "just",
    "left",
    "maybe",
    "none",
    "nothing",
    "ok",
    "option",
    "pair",
    "result",
    "right",
    "safe",
    "safe_async",
    "snd",
    "some",
]
