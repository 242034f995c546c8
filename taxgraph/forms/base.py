"""Lazy line and form machinery.

A form is a bundle of lines. Each line is a zero-argument formula evaluated on
first read and cached on the form instance for its lifetime. A line value is a
``Decimal`` or ``None``; ``None`` means the line does not apply (or cannot be
determined from the inputs) and is never the same as zero.

Forms read each other's lines directly. A form that owns optional subordinate
forms declares them with ``subordinate``; the subordinate is built on first
access and kept only if its trigger predicate holds, so presence of the
reference is the attachment decision.

Reading a line (or subordinate) while it is still being computed raises
``FormCycleError``. An exception escaping a formula is re-raised as
``LineComputationError`` naming the form and line.
"""

import logging
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from taxgraph.exceptions import FormCycleError, LineComputationError, TaxComputationError

logger = logging.getLogger(__name__)

Value = Decimal | None

ZERO = Decimal("0")

F = TypeVar("F", bound="Form")


def positive(value: Value) -> bool:
    """True only for a defined amount greater than zero."""
    return value is not None and value > 0


def or_zero(value: Value) -> Decimal:
    """Treat an undefined amount as zero. Formulas opt into this explicitly."""
    return ZERO if value is None else value


def sum_defined(values: Iterable[Value]) -> Value:
    """Sum the defined amounts; undefined when none is defined."""
    defined = [v for v in values if v is not None]
    if not defined:
        return None
    return sum(defined, ZERO)


class line:
    """Declare a memoized form line.

    Usage::

        class Schedule3(Form):
            @line
            def l10(self) -> Value:
                ...

        schedule3.l10  # computed once, then cached
    """

    def __init__(self, formula: Callable[[Any], Value]):
        self.formula = formula
        self.name = formula.__name__
        self.__doc__ = formula.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Form | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance._memoized(self.name, lambda: self._compute(instance))

    def _compute(self, instance: "Form") -> Value:
        value = self.formula(instance)
        if value is not None and not isinstance(value, Decimal):
            raise LineComputationError(
                instance.designation,
                self.name,
                f"formula returned {type(value).__name__}, expected Decimal or None",
            )
        return value


class subordinate(Generic[F]):
    """Declare an optional subordinate form owned by the enclosing form.

    ``needed`` is the trigger predicate evaluated against the constructed
    candidate. Without it the form class must define ``is_needed()``; a form
    with neither is rejected when the enclosing class is defined. The attribute
    reads as the form when attached and ``None`` otherwise.
    """

    def __init__(self, form_cls: type[F], needed: Callable[[F], bool] | None = None):
        self.form_cls = form_cls
        if needed is None:
            if not callable(getattr(form_cls, "is_needed", None)):
                raise TypeError(
                    f"{form_cls.__name__} defines no is_needed() and no needed= predicate was given"
                )
            needed = form_cls.is_needed
        self.needed = needed
        self.name = form_cls.__name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Form | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance._memoized(self.name, lambda: self._attach(instance))

    def _attach(self, parent: "Form") -> F | None:
        candidate = self.form_cls(parent)
        if self.needed(candidate):
            logger.info("Form %s: attaching %s", parent.designation, candidate.designation)
            return candidate
        logger.debug("Form %s: %s not needed", parent.designation, candidate.designation)
        return None


class Form:
    """Base class for every form in the return."""

    designation: ClassVar[str] = ""
    # IRS "Attachment Sequence No." printed in the form header.
    sequence: ClassVar[int] = 0
    lines: ClassVar[tuple[str, ...]] = ()
    subordinates: ClassVar[tuple[subordinate, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        lines: list[str] = []
        subs: dict[str, subordinate] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, line) and name not in lines:
                    lines.append(name)
                elif isinstance(attr, subordinate):
                    subs[name] = attr
        cls.lines = tuple(lines)
        cls.subordinates = tuple(subs.values())

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._pending: list[str] = []

    def __repr__(self) -> str:
        return f"<Form {self.designation}>"

    def fields(self) -> dict[str, Value]:
        """Every line of this form, in declaration order."""
        return {name: getattr(self, name) for name in self.lines}

    def _memoized(self, key: str, compute: Callable[[], Any]) -> Any:
        if key in self._values:
            return self._values[key]
        if key in self._pending:
            chain = self._pending[self._pending.index(key):] + [key]
            raise FormCycleError(self.designation, key, chain)

        self._pending.append(key)
        try:
            value = compute()
        except TaxComputationError:
            raise
        except Exception as exc:
            raise LineComputationError(self.designation, key, str(exc) or repr(exc)) from exc
        finally:
            self._pending.pop()

        self._values[key] = value
        logger.debug("Form %s %s = %s", self.designation, key, value)
        return value
