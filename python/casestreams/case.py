"""Case reflection for tagged unions.

A union is declared as a direct subclass of CaseAccessible, and each of its
variants as a frozen dataclass subclassing the union:

    class Command(CaseAccessible): ...

    @dataclass(frozen=True)
    class Stop(Command): ...

    @dataclass(frozen=True)
    class Say(Command):
        text: str

A case descriptor selects one variant. It is either a variant instance such as
Stop(), matched on its tag alone, or a variant class such as Say, which also
acts as the payload constructor and is used to extract the payload back out.
"""

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from casestreams.exceptions import CaseDescriptorError, NotAVariantError


class CaseAccessible:
    """Base class of every tagged union.

    Reflection lives in module functions; the class itself has no attributes.
    """


def union_of(cls: type[CaseAccessible]) -> type[CaseAccessible]:
    """Return the union cls belongs to, i.e. the direct subclass of CaseAccessible."""
    for klass in cls.__mro__:
        if CaseAccessible in klass.__bases__:
            return klass
    raise NotAVariantError(f"{cls.__name__} does not belong to a union")


def is_variant(cls: type[CaseAccessible]) -> bool:
    return cls is not CaseAccessible and union_of(cls) is not cls


def case_of(value: CaseAccessible) -> str:
    """Tag of the active variant."""
    return type(value).__name__


def payload_of(value: CaseAccessible) -> Any:
    """Payload of the active variant.

    None for a variant without fields, the field value for a variant with one
    field (named or not), and a tuple of field values for several fields.
    """
    if not dataclasses.is_dataclass(value):
        return None
    values = tuple(getattr(value, f.name) for f in dataclasses.fields(value))
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


type CaseDescriptor[U: CaseAccessible] = U | type[U]


@dataclass(frozen=True)
class CasePattern[U: CaseAccessible]:
    """A resolved case descriptor.

    Attributes:
        variant: Variant class whose instances match
        captures_payload: True when built from a variant class, False from an instance
    """

    variant: type[U]
    captures_payload: bool

    @property
    def union(self) -> type[CaseAccessible]:
        return union_of(self.variant)

    def matches(self, value: object) -> bool:
        return type(value) is self.variant

    def extract(self, value: object) -> Any:
        if not self.matches(value) or not self.captures_payload:
            return None
        return payload_of(value)  # type: ignore[arg-type]

    def capture(self, value: U) -> Any:
        """Captured element of a matching value: its payload, or None for instances."""
        return payload_of(value) if self.captures_payload else None

    def lift[T](self, transform: Callable[..., T]) -> Callable[[Any], T]:
        """Adapt transform to receive the captured element.

        Instance descriptors carry nothing, so their transforms take no argument.
        """
        if self.captures_payload:
            return transform
        return lambda _: transform()


def pattern_of[U: CaseAccessible](descriptor: "CaseDescriptor[U] | CasePattern[U]") -> CasePattern[U]:
    """Resolve a descriptor, raising CaseDescriptorError when it selects no variant."""
    if isinstance(descriptor, CasePattern):
        return descriptor
    if isinstance(descriptor, CaseAccessible):
        variant: type = type(descriptor)
        captures_payload = False
    elif isinstance(descriptor, type) and issubclass(descriptor, CaseAccessible):
        variant = descriptor
        captures_payload = True
    else:
        raise CaseDescriptorError(f"expected a variant instance or class, got {descriptor!r}")

    if not is_variant(variant):
        raise NotAVariantError(f"{variant.__name__} is a union, not one of its variants")
    return CasePattern(variant, captures_payload)


def matches[U: CaseAccessible](value: object, descriptor: CaseDescriptor[U]) -> bool:
    """True when value is the variant selected by descriptor. Payloads are never compared."""
    return pattern_of(descriptor).matches(value)


def extract[U: CaseAccessible](value: object, descriptor: CaseDescriptor[U]) -> Any:
    """Payload of value under descriptor, or None when it does not match."""
    return pattern_of(descriptor).extract(value)
