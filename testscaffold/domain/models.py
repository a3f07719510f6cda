"""
Domain models for the testscaffold system.

This module contains the core domain models using Pydantic for validation
and serialization. These models describe the classes discovered by
introspection and the test files generated from them.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScaffoldError(Exception):
    """Base exception for testscaffold domain errors."""

    pass


class IntrospectionError(ScaffoldError):
    """Raised when a module or class cannot be introspected."""

    pass


class ParameterKind(str, Enum):
    """How a parameter is passed at a generated call site."""

    POSITIONAL = "positional"
    KEYWORD = "keyword"


class ParameterDescriptor(BaseModel):
    """
    Represents a single parameter of a constructor or method.

    The name is used for mock field naming and the annotation drives
    default literal synthesis.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Parameter name as declared")
    type_name: str | None = Field(
        None, description="Declared annotation rendered as a name, None if absent"
    )
    annotation: Any = Field(
        None, exclude=True, description="Resolved annotation object, None if absent"
    )
    kind: ParameterKind = Field(
        default=ParameterKind.POSITIONAL,
        description="Whether the parameter is passed positionally or by keyword",
    )
    is_class: bool = Field(
        default=False,
        description="True when the annotation is a plain class a mock can be specced from",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the parameter name is a usable identifier."""
        if not v.isidentifier():
            raise ValueError(f"Parameter name must be an identifier: {v!r}")
        return v


class ConstructorDescriptor(BaseModel):
    """A constructor candidate for a discovered class."""

    model_config = ConfigDict(frozen=True)

    parameters: tuple[ParameterDescriptor, ...] = Field(
        default=(), description="Ordered constructor parameters"
    )

    @property
    def arity(self) -> int:
        return len(self.parameters)


class MethodDescriptor(BaseModel):
    """A public instance method declared directly on a class."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Method name")
    parameters: tuple[ParameterDescriptor, ...] = Field(
        default=(), description="Ordered method parameters, excluding self"
    )
    returns_value: bool = Field(
        default=True,
        description="False only when the return annotation is None",
    )


class TypeDescriptor(BaseModel):
    """
    Represents a concrete class selected for test generation.

    Descriptors are recomputed on every run and never cached.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Class name")
    qualname: str | None = Field(
        None, description="Dotted path inside the module for nested classes"
    )
    module: str = Field(..., description="Name of the module defining the class")
    methods: tuple[MethodDescriptor, ...] = Field(
        ..., description="Own public instance methods in definition order"
    )
    constructor: ConstructorDescriptor | None = Field(
        None, description="Primary constructor, None when none can be resolved"
    )

    @field_validator("methods")
    @classmethod
    def validate_methods_not_empty(cls, v: Any) -> Any:
        """Validate that at least one method is present."""
        if not v:
            raise ValueError("A candidate type must declare at least one method")
        return v

    @property
    def qualified_name(self) -> str:
        return f"{self.module}.{self.reference}"

    @property
    def reference(self) -> str:
        """Expression naming the class from module scope, e.g. Outer.Inner."""
        return self.qualname or self.name


class GeneratedTestFile(BaseModel):
    """
    Represents one generated test source file.

    Generated files overwrite any previous file of the same name.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str = Field(..., description="Name of the class under test")
    file_name: str = Field(..., description="File name, e.g. WidgetTests.py")
    path: str = Field(..., description="Full path the file was written to")
    content: str = Field(..., description="Rendered test source")
    written: bool = Field(
        default=True, description="False when the file was only rendered (dry run)"
    )
