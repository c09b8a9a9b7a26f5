"""klaw-err: Combinators for plain result tuples and optional values.

No wrapper types: a success is ``('ok', value)``, a failure is
``('error', reason)``, an absent value is ``None`` and anything else is a
present value. The library reads the shape of what it is given.

Namespace imports (preferred):
    import klaw_err as err

    err.map(('ok', 2), lambda x: x * 2)        # ('ok', 4)
    err.unwrap_or(None, 'default.json')        # 'default.json'
    err.all([('ok', 1), ('error', 'x')])       # ('error', 'x')

Submodule imports (for organization):
    from klaw_err.shape import classify, Success, Failure
    from klaw_err.combinators import and_then, or_else_lazy
    from klaw_err.aggregate import partition
"""

# Aggregators
from klaw_err.aggregate import all, partition, values  # noqa: A004

# Combinators
from klaw_err.combinators import (  # noqa: A004
    and_then,
    expect,
    expect_err,
    flatten,
    map,
    map_err,
    or_else,
    or_else_lazy,
    replace,
    replace_err,
    replace_err_lazy,
    replace_lazy,
    unwrap_or,
    unwrap_or_lazy,
)

# Configuration
from klaw_err._config import ErrConfig, get_config, init

# Logging
from klaw_err._logging import add_log_hook, clear_log_hooks, remove_log_hook

# Decorators
from klaw_err.decorators import safe

# Errors
from klaw_err.errors import (
    GenericError,
    GenericFailure,
    UnexpectedShape,
    UnknownOrigin,
    wrap,
)

# Formatting
from klaw_err.formatting import (
    clear_formatters,
    format_generic,
    message,
    register_formatter,
    resolve_formatter,
    unregister_formatter,
)

# Shapes
from klaw_err.shape import (
    ERROR,
    OK,
    Absent,
    AbsentType,
    Classified,
    Failure,
    Opaque,
    Shape,
    Success,
    classify,
    err,
    extract,
    is_err,
    is_none,
    is_ok,
    is_some,
    ok,
    shape_of,
)

__all__ = [
    # Shapes
    'ERROR',
    'OK',
    'Absent',
    'AbsentType',
    'Classified',
    # Configuration
    'ErrConfig',
    'Failure',
    # Errors
    'GenericError',
    'GenericFailure',
    'Opaque',
    'Shape',
    'Success',
    'UnexpectedShape',
    'UnknownOrigin',
    # Logging
    'add_log_hook',
    # Aggregators
    'all',
    # Combinators
    'and_then',
    'classify',
    # Formatting
    'clear_formatters',
    'clear_log_hooks',
    'err',
    'expect',
    'expect_err',
    'extract',
    'flatten',
    'format_generic',
    'get_config',
    'init',
    'is_err',
    'is_none',
    'is_ok',
    'is_some',
    'map',
    'map_err',
    'message',
    'ok',
    'or_else',
    'or_else_lazy',
    'partition',
    'register_formatter',
    'remove_log_hook',
    'replace',
    'replace_err',
    'replace_err_lazy',
    'replace_lazy',
    'resolve_formatter',
    # Decorators
    'safe',
    'shape_of',
    'unregister_formatter',
    'unwrap_or',
    'unwrap_or_lazy',
    'values',
    'wrap',
]
