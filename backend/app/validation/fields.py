"""
Field descriptors: which JSON keys a record type declares.

Each record lists its serialization tags explicitly in ``__json_tags__``.
A tag is the external key name, optionally followed by modifiers::

    class City(StrictRecord):
        __json_tags__ = ("name", "population,omitempty")

        name: str
        population: int = 0

Only the bare key name ("population") takes part in comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from app.core.constants import TAG_MODIFIER_SEPARATOR


@runtime_checkable
class HasFieldSchema(Protocol):
    """Anything that can list its own serialization tags."""

    @classmethod
    def json_tags(cls) -> tuple[str, ...]: ...


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared JSON key, with the raw tag it was read from."""

    name: str
    tag: str

    @classmethod
    def from_tag(cls, tag: str) -> FieldDescriptor:
        return cls(name=bare_name(tag), tag=tag)


def bare_name(tag: str) -> str:
    """Strip tag modifiers: ``"population,omitempty"`` -> ``"population"``."""
    return tag.split(TAG_MODIFIER_SEPARATOR, 1)[0]


def record_type(record: Any) -> type:
    """Return the record class for either a record class or an instance."""
    if not isinstance(record, HasFieldSchema):
        raise TypeError(
            f"{record!r} does not declare JSON fields (expected a record type)"
        )
    return record if isinstance(record, type) else type(record)


def struct_json_fields(record: Any) -> set[str]:
    """
    Return the raw JSON tags a record declares, modifiers included.

    Accepts a record class or an instance of one.

    Example::

        struct_json_fields(City)
        # => {"name", "population,omitempty"}
    """
    return set(record_type(record).json_tags())


def field_descriptors(record: Any) -> list[FieldDescriptor]:
    """
    Return one descriptor per distinct key name, in declaration order.

    If two tags share a key name the last one declared wins.
    """
    by_name: dict[str, FieldDescriptor] = {}
    for tag in record_type(record).json_tags():
        descriptor = FieldDescriptor.from_tag(tag)
        by_name[descriptor.name] = descriptor
    return list(by_name.values())


def expected_fields(record: Any) -> set[str]:
    """Return the bare key names a record declares."""
    # Tags like "tag,omitempty" are replaced by just "tag".
    result = set()
    for field in struct_json_fields(record):
        result.add(bare_name(field))
    return result


class StrictRecord(BaseModel):
    """
    Base class for request bodies that must match their schema exactly.

    Subclasses declare ``__json_tags__`` and may declare
    ``__optional_fields__``, the keys HTTP handlers allow to be absent by
    default.  Decoding is strict: a string never becomes an int.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)

    __json_tags__: ClassVar[tuple[str, ...]] = ()
    __optional_fields__: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def json_tags(cls) -> tuple[str, ...]:
        return cls.__json_tags__

    @classmethod
    def serialized_names(cls) -> set[str]:
        """Keys pydantic reads and writes for this model."""
        return {field.alias or name for name, field in cls.model_fields.items()}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        declared = {bare_name(tag) for tag in cls.__json_tags__}
        serialized = cls.serialized_names()
        if declared != serialized:
            raise TypeError(
                f"{cls.__name__} declares JSON tags {sorted(declared)} "
                f"but its fields serialize as {sorted(serialized)}"
            )
        unknown_optional = set(cls.__optional_fields__) - declared
        if unknown_optional:
            raise TypeError(
                f"{cls.__name__} marks undeclared fields optional: "
                f"{sorted(unknown_optional)}"
            )
