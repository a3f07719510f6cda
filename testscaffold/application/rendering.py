"""
Rendering of scaffold test files.

Turns a TypeDescriptor into pytest source text: two header lines, a test
class holding one mock field per constructor parameter, a setup block that
builds the mocks, and one unasserted test per method.
"""

from ..config.models import GenerationConfig
from ..domain.models import (
    MethodDescriptor,
    ParameterDescriptor,
    ParameterKind,
    TypeDescriptor,
)

INDENT = "    "

_LITERALS_BY_TYPE: tuple[tuple[type, str], ...] = (
    (int, "0"),
    (str, '""'),
    (bool, "False"),
)
_LITERALS_BY_NAME = {"int": "0", "str": '""', "bool": "False"}
_ABSENT_LITERAL = "None"


def default_literal(
    parameter: ParameterDescriptor, extra_literals: dict[str, str] | None = None
) -> str:
    """
    Synthesize a literal argument for a parameter from its annotation.

    ``int`` gives ``0``, ``str`` gives ``""``, ``bool`` gives ``False`` and
    anything else gives ``None``, unless ``extra_literals`` names the
    annotation.

    Args:
        parameter: Parameter to synthesize a value for
        extra_literals: Additional literals keyed by annotation name

    Returns:
        Source text of the literal
    """
    for annotation_type, literal in _LITERALS_BY_TYPE:
        if parameter.annotation is annotation_type:
            return literal

    if isinstance(parameter.annotation, str) and parameter.type_name in _LITERALS_BY_NAME:
        return _LITERALS_BY_NAME[parameter.type_name]

    if extra_literals and parameter.type_name in extra_literals:
        return extra_literals[parameter.type_name]

    return _ABSENT_LITERAL


def mock_field_name(parameter: ParameterDescriptor) -> str:
    return f"_{parameter.name}Mock"


def _call_argument(parameter: ParameterDescriptor, value: str) -> str:
    if parameter.kind == ParameterKind.KEYWORD:
        return f"{parameter.name}={value}"
    return value


class ScaffoldRenderer:
    """Renders scaffold test source for candidate types."""

    def __init__(self, config: GenerationConfig | None = None) -> None:
        self.config = config or GenerationConfig()

    def test_class_name(self, descriptor: TypeDescriptor) -> str:
        return f"{descriptor.name}Tests"

    def file_name(self, descriptor: TypeDescriptor) -> str:
        return f"{self.test_class_name(descriptor)}{self.config.file_extension}"

    def mock_expression(self, parameter: ParameterDescriptor) -> str:
        """Mock construction for a parameter, typed when the annotation is a class."""
        if parameter.is_class:
            return self.config.mock_template.format(type_name=parameter.type_name)
        return self.config.untyped_mock_template

    def render_header(self, descriptor: TypeDescriptor) -> list[str]:
        lines = [self.config.test_framework_import, self.config.mock_framework_import]
        if self.config.import_subject:
            top_level = descriptor.reference.split(".")[0]
            lines.append(f"from {descriptor.module} import {top_level}")
        return lines

    def render_constructor_and_mocks(self, descriptor: TypeDescriptor) -> list[list[str]]:
        """
        Render the mock field block and the setup block.

        Returns no blocks when the type has no constructor. A zero-parameter
        constructor yields an empty setup block.
        """
        constructor = descriptor.constructor
        if constructor is None:
            return []

        blocks = []
        if constructor.parameters:
            blocks.append(
                [
                    f"{mock_field_name(p)}: {self.config.mock_field_type}"
                    for p in constructor.parameters
                ]
            )

        setup = ["def setup_method(self):"]
        for parameter in constructor.parameters:
            setup.append(
                f"{INDENT}self.{mock_field_name(parameter)} = "
                f"{self.mock_expression(parameter)}"
            )
        if not constructor.parameters:
            setup.append(f"{INDENT}pass")
        blocks.append(setup)

        return blocks

    def render_instantiation(self, descriptor: TypeDescriptor) -> str:
        """Instantiate the type under test with one mock per constructor parameter."""
        if descriptor.constructor is None:
            return f"instance = {descriptor.reference}()"

        arguments = ", ".join(
            _call_argument(p, f"self.{mock_field_name(p)}")
            for p in descriptor.constructor.parameters
        )
        return f"instance = {descriptor.reference}({arguments})"

    def render_call(self, method: MethodDescriptor) -> str:
        arguments = ", ".join(
            _call_argument(p, default_literal(p, self.config.extra_literals))
            for p in method.parameters
        )
        call = f"instance.{method.name}({arguments})"
        if method.returns_value:
            return f"{self.config.result_name} = {call}"
        return call

    def render_method_test(
        self, descriptor: TypeDescriptor, method: MethodDescriptor
    ) -> list[str]:
        """Render one scaffold test for a method."""
        return [
            self.config.test_marker,
            f"def {method.name}_Test(self):",
            f"{INDENT}{self.render_instantiation(descriptor)}",
            f"{INDENT}{self.render_call(method)}",
            f"{INDENT}{self.config.assert_placeholder}",
        ]

    def render(self, descriptor: TypeDescriptor) -> str:
        """Render the complete test file for a type."""
        blocks = self.render_constructor_and_mocks(descriptor)
        blocks.extend(
            self.render_method_test(descriptor, method) for method in descriptor.methods
        )

        body: list[str] = []
        for index, block in enumerate(blocks):
            if index:
                body.append("")
            body.extend(f"{INDENT}{line}" for line in block)

        lines = self.render_header(descriptor)
        lines.extend(["", "", f"class {self.test_class_name(descriptor)}:"])
        lines.extend(body)
        return "\n".join(lines) + "\n"
