"""Configuration models for testscaffold."""

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class GenerationConfig(BaseModel):
    """Configuration for how scaffolds are rendered and where they go."""

    output_dir_name: str = Field(
        default="GeneratedTests",
        description="Directory created under the working directory for output",
    )

    file_extension: str = Field(
        default=".py", description="Extension of generated test files"
    )

    test_framework_import: str = Field(
        default="import pytest", description="First header line of every file"
    )

    mock_framework_import: str = Field(
        default="from unittest.mock import Mock",
        description="Second header line of every file",
    )

    mock_template: str = Field(
        default="Mock(spec={type_name})",
        description="Mock construction for a parameter with a class annotation",
    )

    mock_field_type: str = Field(
        default="Mock", description="Annotation of each mock field"
    )

    untyped_mock_template: str = Field(
        default="Mock()",
        description="Mock construction for an unannotated or non-class parameter",
    )

    test_marker: str = Field(
        default="@pytest.mark.unit", description="Decorator tagging each test"
    )

    result_name: str = Field(
        default="result", description="Local capturing a method's return value"
    )

    assert_placeholder: str = Field(
        default="# Assert here", description="Comment marking where assertions go"
    )

    import_subject: bool = Field(
        default=False,
        description="Add 'from <module> import <Type>' after the header lines",
    )

    extra_literals: dict[str, str] = Field(
        default_factory=dict,
        description="Extra default literals keyed by annotation name",
    )

    @field_validator("file_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        if not v.startswith("."):
            raise ValueError("file_extension must start with '.'")
        return v

    @field_validator("mock_template")
    @classmethod
    def validate_mock_template(cls, v: str) -> str:
        """Ensure the template has a slot for the type name."""
        if "{type_name}" not in v:
            raise ValueError("mock_template must contain '{type_name}'")
        return v

    @field_validator("result_name")
    @classmethod
    def validate_result_name(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError("result_name must be a valid identifier")
        return v


class DiscoveryConfig(BaseModel):
    """Configuration for which modules are inspected."""

    modules: list[str] = Field(
        default_factory=list,
        description="Modules to inspect; empty means every loaded module",
    )

    skip_unintrospectable: bool = Field(
        default=False,
        description="Log and skip modules that cannot be imported or read",
    )

    @field_validator("modules", mode="before")
    @classmethod
    def split_module_string(cls, v):
        """Accept a comma-separated string, as set from the environment."""
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v


class LoggingConfig(BaseModel):
    """Logging behavior configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level when neither -v nor -q is given"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class ScaffoldConfig(BaseModel):
    """Main configuration model for testscaffold."""

    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="Scaffold rendering and output configuration",
    )

    discovery: DiscoveryConfig = Field(
        default_factory=DiscoveryConfig,
        description="Module catalog configuration",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging behavior configuration",
    )
