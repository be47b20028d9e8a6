"""Option and Result types with unwrap-and-sandbox error propagation."""

from optres._tag import Family, Kind, family_of, kind_of
from optres.combinators import and_then, map, map_err, or_else, unwrap, unwrap_or  # noqa: A004
from optres.config import (
    SandboxSettings,
    configure,
    create_config,
    get_settings,
    load_sandbox_settings,
    use_settings,
)
from optres.errors import ConfigurationError, OptresError, RunError, UncontrolledFailure, UnwrapError
from optres.option import NOTHING, Nothing, Option, Some, is_none, is_option, is_some, none, some
from optres.result import Err, Ok, Result, err, is_err, is_ok, is_result, ok
from optres.sandbox import box, run, safe, safe_box

__all__ = [
    "NOTHING",
    "ConfigurationError",
    "Err",
    "Family",
    "Kind",
    "Nothing",
    "Ok",
    "Option",
    "OptresError",
    "Result",
    "RunError",
    "SandboxSettings",
    "Some",
    "UncontrolledFailure",
    "UnwrapError",
    "and_then",
    "box",
    "configure",
    "create_config",
    "err",
    "family_of",
    "get_settings",
    "is_err",
    "is_none",
    "is_ok",
    "is_option",
    "is_result",
    "is_some",
    "kind_of",
    "load_sandbox_settings",
    "map",
    "map_err",
    "none",
    "ok",
    "or_else",
    "run",
    "safe",
    "safe_box",
    "some",
    "unwrap",
    "unwrap_or",
    "use_settings",
]
