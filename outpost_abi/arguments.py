"""
Typed access to loosely-typed call arguments.

Callers supply arguments either as native JSON values (``42``, ``true``,
``[1, 2]``) or as strings that encode JSON (``"42"``, ``"true"``,
``"[1, 2]"``). ``ArgumentStore.get`` resolves both to the requested type
with a fixed precedence:

1. Absent name -> ``ArgumentNotFound``.
2. Direct decode: the value is validated as ``target`` in strict mode.
3. String fallback: only if (2) failed and the value is a ``str``, the
   text is parsed as JSON and validated as ``target``.
4. If both fail, the direct-decode error is reported.

A null value satisfies targets that admit ``None`` and is reported as
``ArgumentNotFound`` for every other target.
"""

import copy
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from outpost_abi.errors import ArgumentNotFound, TypeCoercionFailed
from outpost_abi.logging.config import get_logger, log_coercion

logger = get_logger(__name__)

STAGE_DIRECT = "direct"
STAGE_STRING_FALLBACK = "string_fallback"


@lru_cache(maxsize=256)
def _cached_type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def type_adapter(target: Any) -> TypeAdapter:
    """Validator for ``target``, built once per hashable annotation."""
    try:
        return _cached_type_adapter(target)
    except TypeError:
        # Unhashable annotation metadata, e.g. Annotated[int, Field(gt=0)]
        return TypeAdapter(target)


def type_name(target: Any) -> str:
    """Readable name for a type annotation (``int``, ``list[int]``, ``Optional[str]``)."""
    if isinstance(target, type) and not getattr(target, "__args__", None):
        return target.__name__
    return repr(target).replace("typing.", "")


def decode_direct(value: Any, target: Any) -> Any:
    """
    Decode an untyped JSON value as ``target`` without string reinterpretation.

    The value is validated in strict JSON mode, so ``"42"`` is not an
    ``int`` here, while ``42`` is a valid ``float`` and ``[1, 2]`` a valid
    ``tuple[int, int]``.

    Raises:
        ValidationError: If the value does not match ``target``
    """
    return type_adapter(target).validate_json(to_json(value), strict=True)


def decode_text(text: str, target: Any) -> Any:
    """
    Parse ``text`` as a JSON document and decode it as ``target``.

    Raises:
        ValidationError: If the text is not JSON or does not match ``target``
    """
    return type_adapter(target).validate_json(text, strict=True)


def coerce(name: str, value: Any, target: Any) -> Any:
    """
    Resolve one present argument value to ``target``.

    Args:
        name: Argument name, used for diagnostics
        value: Untyped value as supplied (may be None)
        target: Requested type annotation

    Returns:
        Value of type ``target``

    Raises:
        ArgumentNotFound: If the value is null and ``target`` does not admit None
        TypeCoercionFailed: If neither decode stage succeeds
    """
    target_name = type_name(target)

    try:
        result = decode_direct(value, target)
    except ValidationError as direct_error:
        log_coercion(logger, name, target_name, STAGE_DIRECT, False)

        if value is None:
            raise ArgumentNotFound(name, present_but_null=True, target=target_name) from direct_error

        if not isinstance(value, str):
            raise _coercion_failed(name, target_name, direct_error, False) from direct_error

        try:
            result = decode_text(value, target)
        except ValidationError as fallback_error:
            log_coercion(
                logger, name, target_name, STAGE_STRING_FALLBACK, False,
                context={"error": _first_message(fallback_error)},
            )
            raise _coercion_failed(name, target_name, direct_error, True) from direct_error

        log_coercion(logger, name, target_name, STAGE_STRING_FALLBACK, True)
        return result

    log_coercion(logger, name, target_name, STAGE_DIRECT, True)
    return result


def _first_message(error: ValidationError) -> str:
    errors = error.errors(include_url=False)
    return errors[0]["msg"] if errors else str(error)


def _coercion_failed(name: str, target_name: str, error: ValidationError,
                     fallback_attempted: bool) -> TypeCoercionFailed:
    return TypeCoercionFailed(
        name,
        target_name,
        _first_message(error),
        details=error.errors(include_url=False, include_input=False),
        fallback_attempted=fallback_attempted,
    )


class ArgumentStore:
    """Read-only mapping of call argument names to untyped JSON values."""

    def __init__(self, call_arguments: Optional[Mapping[str, Any]] = None):
        # Nested lists and dicts must not stay shared with the caller's payload
        self._arguments = MappingProxyType(copy.deepcopy(dict(call_arguments or {})))

    def __contains__(self, name: object) -> bool:
        return name in self._arguments

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"ArgumentStore(names={sorted(self._arguments)!r})"

    def list_argument_names(self) -> frozenset[str]:
        """Names of all supplied arguments."""
        return frozenset(self._arguments)

    def as_mapping(self) -> Mapping[str, Any]:
        """Read-only copy of every argument in its untyped form."""
        return MappingProxyType(copy.deepcopy(dict(self._arguments)))

    def get_raw(self, name: str) -> Any:
        """
        Return the argument as supplied, without coercion.

        A present null is returned as ``None``.

        Raises:
            ArgumentNotFound: If ``name`` was not supplied
        """
        if name not in self._arguments:
            logger.debug("Argument lookup failed", argument=name)
            raise ArgumentNotFound(name)
        return copy.deepcopy(self._arguments[name])

    def get(self, name: str, target: Any) -> Any:
        """
        Return argument ``name`` decoded as ``target``.

        Examples:
            store = ArgumentStore({"period": "14", "symbols": ["BTC", "ETH"]})
            store.get("period", int)            # 14
            store.get("period", str)            # "14"
            store.get("symbols", list[str])     # ["BTC", "ETH"]

        Raises:
            ArgumentNotFound: If ``name`` is absent, or null for a non-nullable target
            TypeCoercionFailed: If the value cannot be decoded as ``target``
        """
        if name not in self._arguments:
            logger.debug("Argument lookup failed", argument=name)
            raise ArgumentNotFound(name, target=type_name(target))
        return coerce(name, self._arguments[name], target)
