"""Predicate chain and the ``Validator`` composition wrapper.

A validator is built from three parts:

1. A preprocess function that turns raw input into the canonical form.
2. An ordered list of ``Rule`` objects, each pairing a message key with a
   predicate. Rules are evaluated fail-fast: the first failing rule is the
   one reported.
3. A message namespace used to resolve the rule's key in the catalog.

The required check always runs first. It only decides whether empty input is
an error or resolves to ``None``; it never changes which rules run.
"""

from collections.abc import Callable, Collection, Mapping, Sequence
from dataclasses import dataclass
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BeforeValidator

from validkit.core.errors import ValidationError, ValidationFailed
from validkit.core.result import Failure, Result, Success, is_success
from validkit.domain.validators.preprocess import is_empty
from validkit.i18n import get_locale, has_message, interpolate, normalize_locale, t

T = TypeVar("T")

Params = Mapping[str, Any] | Callable[[Any], Mapping[str, Any]] | None


@dataclass(frozen=True, slots=True)
class Rule:
    """One step of a predicate chain.

    Attributes:
        key: Message key reported when ``test`` fails.
        test: Predicate over the preprocessed value; True means the value passes.
        params: Interpolation parameters, or a callable computing them from
            the value.
    """

    key: str
    test: Callable[[Any], bool]
    params: Params = None

    def resolve_params(self, value: Any) -> dict[str, Any]:
        if self.params is None:
            return {}
        if callable(self.params):
            return dict(self.params(value))
        return dict(self.params)


class Validator(Generic[T]):
    """Reusable validator: preprocess, required check, ordered rules.

    Args:
        name: Validator name (reported in errors and in the registry).
        namespace: Catalog namespace for rule keys (e.g. ``"taiwan.tel"``).
        rules: Ordered predicate chain.
        required: Whether empty input is an error.
        preprocess: Raw input -> canonical value.
        finalize: Applied to the value after every rule has passed.
        accept: Short-circuit predicate evaluated right after the required
            check; a True result accepts the value without running ``rules``.
        messages: Per-locale message overrides, already keyed by canonical
            locale.
        invalid_fallback_keys: Keys that fall back to ``<namespace>.invalid``
            when the catalog has no entry for them.

    Example:
        >>> v = business_id()
        >>> v.parse("12345675")
        '12345675'
        >>> v.safe_parse("12345672").error.key
        'invalid'
    """

    def __init__(
        self,
        name: str,
        *,
        namespace: str,
        rules: Sequence[Rule] = (),
        required: bool = True,
        preprocess: Callable[[Any], Any] | None = None,
        finalize: Callable[[Any], Any] | None = None,
        accept: Callable[[Any], bool] | None = None,
        messages: Mapping[str, Mapping[str, str]] | None = None,
        invalid_fallback_keys: Collection[str] = (),
    ) -> None:
        self.name = name
        self.namespace = namespace
        self.rules: tuple[Rule, ...] = tuple(rules)
        self.required = required
        self._preprocess = preprocess
        self._finalize = finalize
        self._accept = accept
        self._messages = {normalize_locale(k): dict(v) for k, v in (messages or {}).items()}
        self._invalid_fallback_keys = frozenset(invalid_fallback_keys)

    def __repr__(self) -> str:
        return f"Validator(name={self.name!r}, rules={[rule.key for rule in self.rules]})"

    def safe_parse(self, value: Any, *, locale: str | None = None) -> Result[T | None, ValidationError]:
        """Validate ``value`` without raising.

        Args:
            value: Raw input.
            locale: Locale for the error message (defaults to the current one).

        Returns:
            Success with the canonical value, or Failure with the first
            violated rule.
        """
        processed = self._preprocess(value) if self._preprocess else value

        if is_empty(processed):
            if self.required:
                return Failure(error=self._error("required", {}, locale))
            return Success(value=processed)

        if self._accept is not None and self._accept(processed):
            return Success(value=processed)

        for rule in self.rules:
            if not rule.test(processed):
                return Failure(error=self._error(rule.key, rule.resolve_params(processed), locale))

        if self._finalize is not None:
            processed = self._finalize(processed)
        return Success(value=processed)

    def parse(self, value: Any, *, locale: str | None = None) -> T | None:
        """Validate ``value`` and return its canonical form.

        Raises:
            ValidationFailed: If any rule fails.
        """
        result = self.safe_parse(value, locale=locale)
        if isinstance(result, Failure):
            raise ValidationFailed(result.error)
        return result.value

    __call__ = parse

    def is_valid(self, value: Any) -> bool:
        return is_success(self.safe_parse(value))

    def annotated(self, python_type: Any = Any) -> Any:
        """Return a pydantic ``Annotated`` type running this validator.

        Example:
            >>> class Company(BaseModel):
            ...     tax_id: business_id().annotated(str)
        """

        def _validate(value: Any) -> Any:
            return self.parse(value)

        return Annotated[python_type, BeforeValidator(_validate)]

    def message_for(self, key: str, params: Mapping[str, Any] | None = None, *, locale: str | None = None) -> str:
        """Resolve the message for ``key`` in ``locale``.

        Lookup order: validator override, ``<namespace>.<key>`` in the
        catalog, ``<namespace>.invalid`` for fallback keys, then the raw key.
        """
        resolved = normalize_locale(locale) if locale else get_locale()
        override = self._messages.get(resolved, {}).get(key)
        if override is not None:
            return interpolate(override, params)

        full_key = f"{self.namespace}.{key}"
        if key in self._invalid_fallback_keys and not has_message(full_key, locale=resolved):
            full_key = f"{self.namespace}.invalid"
        if key == "required" and not has_message(full_key, locale=resolved):
            full_key = "common.required"
        return t(full_key, params, locale=resolved)

    def _error(self, key: str, params: dict[str, Any], locale: str | None) -> ValidationError:
        resolved = normalize_locale(locale) if locale else get_locale()
        return ValidationError(
            message=self.message_for(key, params, locale=resolved),
            key=key,
            params=params,
            validator=self.name,
            locale=resolved,
        )
