"""Composable Validation Engine

Validators compose into larger validators; schemas walk nested object graphs
while tracking where each violation happened; violations accumulate as
path-qualified, localizable messages.

Key Features:
- Combinator algebra (and/or/then/map/constrain/only_if/with_message)
- Object schemas with dynamic rules and cycle-safe recursion
- Accumulate-all or fail-fast evaluation
- Resource messages resolved against the ambient locale at read time
- Per-type builders via the Kova factory

Usage:
    from kova.validation import Kova, ObjectSchema, ValidationConfig, try_validate

    user = ObjectSchema.of(
        "User",
        name=Kova.string().min(1).max(10),
        tags=Kova.list().on_each(Kova.string().not_blank()),
    )
    result = user.try_validate({"name": "", "tags": ["a", " "]})
    for message in result.messages:
        print(message.path.full_name, message.text)
"""

# Paths and messages
from .path import Index, MapEntry, MapKey, MapValue, Named, Path, Property, Segment
from .message import Message, OrMessage, ResourceMessage, TextMessage
from .resources import (
    MessageCatalog,
    default_catalog,
    format_template,
    get_locale,
    resolve_template,
    set_locale,
    set_lookup,
    use_locale,
)
from .log import LogEntry, Satisfied, Violated

# Results and errors
from .result import Both, Failure, Success, ValidationResult
from .errors import (
    KovaError,
    MessageError,
    MissingResourceError,
    UnrecoveredSignalError,
    ValidationException,
)

# Control layer
from .accumulate import Alternative, Err, Ok, ValidationToken, accumulating, bind, ior, recover_validation
from .context import ConstraintContext, ValidationContext
from .constraint import Constraint, ConstraintResult, ConstraintSatisfied, ConstraintViolated

# Validators
from .validator import (
    And,
    Chain,
    ConstrainableValidator,
    Identity,
    Or,
    Then,
    Validator,
    custom,
    lazy,
)
from .nullable import NullableValidator
from .schema import ObjectSchema, Rule
from .containers import CollectionValidator, MapValidator
from .comparables import ComparableValidator, NumberValidator
from .strings import StringValidator
from .temporal import TemporalValidator
from .literals import BooleanValidator, GenericValidator
from .factory import Kova

# Entry points
from .boundaries import try_validate, validate

from kova.config import ValidationConfig, fixed_clock


__all__ = [
    # Paths and messages
    "Path",
    "Segment",
    "Property",
    "Named",
    "Index",
    "MapKey",
    "MapValue",
    "MapEntry",
    "Message",
    "TextMessage",
    "ResourceMessage",
    "OrMessage",
    "MessageCatalog",
    "default_catalog",
    "format_template",
    "resolve_template",
    "get_locale",
    "set_locale",
    "use_locale",
    "set_lookup",
    "LogEntry",
    "Satisfied",
    "Violated",
    # Results and errors
    "ValidationResult",
    "Success",
    "Failure",
    "Both",
    "KovaError",
    "ValidationException",
    "MessageError",
    "MissingResourceError",
    "UnrecoveredSignalError",
    # Control layer
    "ValidationToken",
    "recover_validation",
    "accumulating",
    "ior",
    "bind",
    "Alternative",
    "Ok",
    "Err",
    "ValidationContext",
    "ConstraintContext",
    "Constraint",
    "ConstraintResult",
    "ConstraintSatisfied",
    "ConstraintViolated",
    # Validators
    "Validator",
    "ConstrainableValidator",
    "Identity",
    "And",
    "Chain",
    "Or",
    "Then",
    "custom",
    "lazy",
    "NullableValidator",
    "ObjectSchema",
    "Rule",
    "CollectionValidator",
    "MapValidator",
    "ComparableValidator",
    "NumberValidator",
    "StringValidator",
    "TemporalValidator",
    "BooleanValidator",
    "GenericValidator",
    "Kova",
    # Entry points
    "try_validate",
    "validate",
    "ValidationConfig",
    "fixed_clock",
]
