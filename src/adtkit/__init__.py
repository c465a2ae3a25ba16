"""adtkit: Option, Result/Either, Pair and Triple for Python 3.13+.

Flat imports (preferred):
    from adtkit import Option, Some, Nothing, Result, Done, Fail
    from adtkit import option, result, either, pair, triple

Namespaces hold the free-function surface:
    option.map(option.from_nullable(x), f)
    result.fold(r, on_fail, on_done)
"""

from adtkit import either, option, pair, result, triple
from adtkit._config import Config, get_config, init, reset
from adtkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from adtkit.decorators import optional, optional_async, safe, safe_async
from adtkit.errors import AdtError, ArityError, UnwrapError
from adtkit.types import (
    Done,
    Either,
    Fail,
    Left,
    Nothing,
    NothingType,
    Option,
    Pair,
    Result,
    Right,
    Some,
    Triple,
)

__all__ = [
    "AdtError",
    "ArityError",
    "Config",
    "Done",
    "Either",
    "Fail",
    "Left",
    "Nothing",
    "NothingType",
    "Option",
    "Pair",
    "Result",
    "Right",
    "Some",
    "Triple",
    "UnwrapError",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "either",
    "get_config",
    "get_logger",
    "init",
    "option",
    "optional",
    "optional_async",
    "pair",
    "remove_log_hook",
    "reset",
    "result",
    "safe",
    "safe_async",
    "triple",
]
