"""Object Schemas

Declarative property-to-validator mapping for structured objects. Each
property is validated under its own Path segment, object-wide constraints
run with the object's own path, and self-referential graphs are traversed
safely: re-entering an object that is already being validated along the
current path is a vacuous success.

Key Features:
- Declaration order is message order
- Dynamic rules choose a validator from the original input object
- Re-declaring or replacing a property overrides the earlier rule in place
- Mapping inputs are read by key, other objects by attribute

Usage:
    from kova.validation import Kova, ObjectSchema

    address = ObjectSchema.of("Address", street=Kova.string().not_blank())
    user = (
        ObjectSchema("User")
        .property("name", Kova.string().min(1).max(10))
        .property("address", address)
        .choose("postal_code", lambda u: JP_POSTAL if u.country == "JP" else US_POSTAL)
        .constrain("user.adult", lambda cc: cc.input.age >= 18, "must be an adult")
    )
    result = user.try_validate(some_user)
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, TypeVar

from .constraint import Check, Constraint, MessageProvider
from .context import ValidationContext
from .path import Property
from .validator import Validator

T = TypeVar("T")

Getter = Callable[[Any], Any]
Chooser = Callable[[Any], Validator[Any, Any]]


def attribute(name: str) -> Getter:
    """Read ``name`` by key from mappings, by attribute otherwise."""
    def get(obj: Any) -> Any: return obj[name] if isinstance(obj, Mapping) else getattr(obj, name)
    return get


@dataclass(frozen=True, slots=True)
class Rule:
    """Validator selection for one property."""
    name: str
    choose: Chooser
    getter: Getter

    def run(self, ctx: ValidationContext, obj: Any) -> Any:
        validator = self.choose(obj)
        with ctx.descend(Property(self.name)):
            return validator.run(ctx, self.getter(obj))


@dataclass(frozen=True, slots=True)
class ObjectSchema(Validator[T, T]):
    name: str | None = None
    rules: tuple[Rule, ...] = ()
    constraints: tuple[Constraint[T], ...] = ()

    @classmethod
    def of(cls, name: str | type | None = None, /, **validators: Validator[Any, Any]) -> ObjectSchema:
        """Schema with one static rule per keyword, in keyword order."""
        schema = cls(name.__name__ if isinstance(name, type) else name)
        for prop, validator in validators.items(): schema = schema.property(prop, validator)
        return schema

    def run(self, ctx: ValidationContext, value: T) -> T:
        if ctx.is_visiting(value): return value
        with ctx.visit(value), ctx.rooted(self.name or type(value).__name__):
            outcomes = [ctx.accumulating(lambda rule=rule: rule.run(ctx, value)) for rule in self.rules]
            outcomes += [ctx.accumulating(lambda c=c: c.evaluate(ctx, value)) for c in self.constraints]
            for outcome in outcomes: outcome.unwrap()
        return value

    def rule(self, name: str) -> Rule | None: return next((r for r in self.rules if r.name == name), None)

    def _with_rule(self, rule: Rule) -> ObjectSchema[T]:
        if self.rule(rule.name) is None: return replace(self, rules=(*self.rules, rule))
        return replace(self, rules=tuple(rule if r.name == rule.name else r for r in self.rules))

    def choose(self, name: str, chooser: Chooser, *, getter: Getter | None = None) -> ObjectSchema[T]:
        """Pick the property's validator from the whole (original) input object."""
        return self._with_rule(Rule(name, chooser, getter or attribute(name)))

    def replace(self, name: str, validator: Validator[Any, Any]) -> ObjectSchema[T]:
        """Swap the validator of an existing property, keeping its getter and position."""
        if (existing := self.rule(name)) is None: raise KeyError(f"no rule for property '{name}'")
        return self._with_rule(Rule(name, lambda obj: validator, existing.getter))

    def merge(self, other: ObjectSchema[Any]) -> ObjectSchema[T]:
        """Combine rules and constraints; ``other``'s rules win for shared names."""
        merged = self
        for rule in other.rules: merged = merged._with_rule(rule)
        return replace(merged, constraints=(*self.constraints, *other.constraints))

    def constrain(self, constraint_id: str, check: Check, message: MessageProvider | str | None = None, *,
                  args: tuple[Any, ...] = (), kwargs: dict[str, Any] | None = None) -> ObjectSchema[T]:
        """Object-wide constraint, evaluated after the property rules."""
        return replace(self, constraints=(*self.constraints, Constraint(constraint_id, check, message, args, kwargs or {})))

    def property(self, name: str, validator: Validator[Any, Any], *, getter: Getter | None = None) -> ObjectSchema[T]:
        return self._with_rule(Rule(name, lambda obj: validator, getter or attribute(name)))
