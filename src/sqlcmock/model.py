"""Intermediate representation handed to the mock template."""

from __future__ import annotations

from dataclasses import dataclass, field

# Name of the interface sqlc emits and the mock struct generated for it.
TARGET_INTERFACE = "Querier"
STRUCT_NAME = "Mocker"


@dataclass(frozen=True)
class Field:
    """A single parameter or result; *name* is empty when unnamed."""

    name: str
    type: str


@dataclass(frozen=True)
class Method:
    """One method of the target interface, in declaration order."""

    name: str
    input: tuple[Field, ...] = ()
    output: tuple[Field, ...] = ()


@dataclass(frozen=True)
class Import:
    """An import spec copied from the source file."""

    path: str
    name: str = ""  # explicit alias, "." or "_"; never inferred


@dataclass(frozen=True)
class Output:
    """Everything the template needs to render a mock."""

    gen_package: str
    model_path: str
    package: str
    struct: str = STRUCT_NAME
    imports: tuple[Import, ...] = field(default_factory=tuple)
    methods: tuple[Method, ...] = field(default_factory=tuple)
