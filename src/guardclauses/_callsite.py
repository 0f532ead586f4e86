"""Automatic capture of the diagnostic context for guard messages.

Every guard message names the guarded parameter and the operation that
invoked the guard. Callers may pass both explicitly; when they don't, they
are recovered from the calling frame:

- method: the name of the calling function (``<module>`` at module level)
- parameter: the source text of the expression passed as the guarded value,
  e.g. ``order.amount`` for ``ensure_positive(order.amount)``

Frames that belong to this package are skipped, so guards that delegate to
other guards (or the fluent wrapper) still report the user's call site.

The expression is located through the code object's instruction positions
(PEP 657), so several guard calls on one line each resolve their own
argument. The located call must name the guard itself (``ensure_positive(...)``
or ``module.ensure_positive(...)``); anything else means the guard was not
called directly from that line, e.g. ``map(ensure_positive, amounts)``.

The parameter falls back to PARAMETER_FALLBACK when the source is unavailable
(interactive sessions, frozen apps) or the call does not name the guard. When
the nearest frame belongs to an event loop or executor (a guard scheduled with
``asyncio.gather`` or ``create_task``) the real caller is not on the stack, so
the method falls back to METHOD_FALLBACK as well.
"""

from __future__ import annotations

import ast
import linecache
import logging
import sys
import types
import typing
from dataclasses import dataclass
from types import FrameType
from typing import Any

_logger = logging.getLogger(__name__)

PARAMETER_FALLBACK = "<value>"
METHOD_FALLBACK = "<unknown>"

_PACKAGE = __name__.partition(".")[0]

# Frames of these modules run callbacks and tasks; they are never the guard's caller
_RUNNER_MODULES = ("asyncio", "concurrent.futures", "threading")


@dataclass(frozen=True)
class CallSite:
    """Diagnostic context of one guard invocation.

    Attributes:
        parameter: Source expression of the guarded value
        method: Name of the calling operation
        declared_type: Annotated type of the guarded expression, when requested
            and resolvable (Optional[...] already unwrapped)
    """

    parameter: str
    method: str
    declared_type: Any = None


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def _is_runner(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return any(module == name or module.startswith(name + ".") for name in _RUNNER_MODULES)


def _caller_frame() -> FrameType | None:
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    return frame


def _source_segment(frame: FrameType) -> str | None:
    """Return the source text of the instruction the frame is executing."""
    code = frame.f_code
    try:
        lineno, end_lineno, col, end_col = list(code.co_positions())[frame.f_lasti // 2]
    except (AttributeError, IndexError, ValueError):
        return None
    if lineno is None or end_lineno is None or col is None or end_col is None:
        return None

    lines = linecache.getlines(code.co_filename, frame.f_globals)
    if len(lines) < end_lineno:
        return None

    # Column offsets are UTF-8 byte offsets
    chunk = [line.encode("utf-8") for line in lines[lineno - 1 : end_lineno]]
    if len(chunk) == 1:
        chunk[0] = chunk[0][col:end_col]
    else:
        chunk[0] = chunk[0][col:]
        chunk[-1] = chunk[-1][:end_col]
    return b"".join(chunk).decode("utf-8", errors="replace")


def _call_node(segment: str) -> ast.Call | None:
    try:
        node = ast.parse(segment.strip(), mode="eval").body
    except SyntaxError:
        return None
    if isinstance(node, ast.Await):
        node = node.value
    return node if isinstance(node, ast.Call) else None


def _callee_name(call: ast.Call) -> str | None:
    """`f` for `f(...)`, `attr` for `obj.attr(...)`, None otherwise."""
    if isinstance(call.func, ast.Name):
        return call.func.id
    if isinstance(call.func, ast.Attribute):
        return call.func.attr
    return None


def _value_argument(call: ast.Call) -> ast.expr | None:
    """The guarded value is the first positional argument or `value=`."""
    if call.args and not isinstance(call.args[0], ast.Starred):
        return call.args[0]
    for keyword in call.keywords:
        if keyword.arg == "value":
            return keyword.value
    return None


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError, AttributeError) as e:
        _logger.debug("Could not resolve annotations of %r: %s", obj, e)
        return {}


def _enclosing_function(frame: FrameType) -> Any:
    """Find the function object whose code the frame is running."""
    name = frame.f_code.co_name
    candidates = [frame.f_globals.get(name)]
    for owner_name in ("self", "cls"):
        owner = frame.f_locals.get(owner_name)
        if owner is not None:
            owner_type = owner if isinstance(owner, type) else type(owner)
            candidates.append(getattr(owner_type, name, None))
    for candidate in candidates:
        func = getattr(candidate, "__func__", candidate)
        if getattr(func, "__code__", None) is frame.f_code:
            return func
    return None


def _declared_type(frame: FrameType, expression: ast.expr) -> Any:
    """Resolve the annotation of `name` or `owner.attribute` expressions."""
    if isinstance(expression, ast.Name):
        func = _enclosing_function(frame)
        if func is None:
            return None
        annotation = _hints(func).get(expression.id)
    elif isinstance(expression, ast.Attribute) and isinstance(expression.value, ast.Name):
        owner_name = expression.value.id
        scope = frame.f_locals if owner_name in frame.f_locals else frame.f_globals
        if owner_name not in scope:
            return None
        owner = scope[owner_name]
        owner_type = owner if isinstance(owner, type) else type(owner)
        annotation = _hints(owner_type).get(expression.attr)
    else:
        return None
    return _unwrap_optional(annotation) if annotation is not None else None


def capture(
    parameter: str | None = None,
    method: str | None = None,
    *,
    callee: str | tuple[str, ...] = (),
    with_type: bool = False,
) -> CallSite:
    """Build the CallSite for the guard currently executing.

    Explicit values always win; only missing parts are recovered from the
    first frame outside this package.

    Args:
        parameter: Explicit parameter name, or None to capture it.
        method: Explicit operation name, or None to capture it.
        callee: Name(s) the guard can be called by, aliases included. The
            call found on the caller's line must use one of them. Empty
            accepts any call.
        with_type: Also resolve the declared type of the guarded expression.
    """
    if parameter is not None and method is not None and not with_type:
        return CallSite(parameter=parameter, method=method)

    frame = _caller_frame()
    if frame is None:
        return CallSite(parameter=parameter or PARAMETER_FALLBACK, method=method or METHOD_FALLBACK)

    try:
        if _is_runner(frame):
            _logger.debug(
                "Guard invoked from %s.%s; caller is not on the stack",
                frame.f_globals.get("__name__", ""),
                frame.f_code.co_name,
            )
            return CallSite(
                parameter=parameter if parameter is not None else PARAMETER_FALLBACK,
                method=method if method is not None else METHOD_FALLBACK,
            )

        names = (callee,) if isinstance(callee, str) else callee
        expression = None
        if parameter is None or with_type:
            segment = _source_segment(frame)
            call = _call_node(segment) if segment else None
            if call is not None and (not names or _callee_name(call) in names):
                expression = _value_argument(call)

        if parameter is None:
            if expression is not None:
                parameter = ast.unparse(expression)
            else:
                _logger.debug(
                    "Could not determine guarded expression in %s (%s:%s)",
                    frame.f_code.co_name,
                    frame.f_code.co_filename,
                    frame.f_lineno,
                )
                parameter = PARAMETER_FALLBACK

        declared = _declared_type(frame, expression) if with_type and expression is not None else None
        return CallSite(
            parameter=parameter,
            method=method if method is not None else frame.f_code.co_name,
            declared_type=declared,
        )
    finally:
        del frame
