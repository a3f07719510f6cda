"""
Runtime inspector adapter implementation.

This module provides an adapter that walks live module objects and extracts
the classes that qualify for test scaffolding, together with their public
instance methods and primary constructor.
"""

import inspect
import logging
import typing
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any

from ...domain.models import (
    ConstructorDescriptor,
    IntrospectionError,
    MethodDescriptor,
    ParameterDescriptor,
    ParameterKind,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)

_CONSTRUCTOR_HOOKS = ("__init__", "__new__")
_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_NON_INSTANCE_MEMBERS = (staticmethod, classmethod, property)


def annotation_name(annotation: Any) -> str | None:
    """Render an annotation as the name used in generated source."""
    if annotation is inspect.Parameter.empty or annotation is None:
        return None
    if isinstance(annotation, str):
        return annotation.strip("'\"")
    if is_plain_class(annotation):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def is_plain_class(annotation: Any) -> bool:
    """Return True for a real class, False for generics, unions and strings."""
    return isinstance(annotation, type) and typing.get_origin(annotation) is None


def _is_none_annotation(annotation: Any) -> bool:
    if annotation is None or annotation is type(None):
        return True
    return isinstance(annotation, str) and annotation == "None"


def _unwrap_function(value: Any) -> Callable[..., Any] | None:
    try:
        func = inspect.unwrap(value)
    except ValueError:
        return None
    return func if inspect.isfunction(func) else None


def select_primary_constructor(
    candidates: list[ConstructorDescriptor],
) -> ConstructorDescriptor | None:
    """
    Pick the constructor with the most parameters.

    Ties keep the first candidate in enumeration order.

    Args:
        candidates: Constructor candidates in enumeration order

    Returns:
        The primary constructor, or None when there are no candidates
    """
    if not candidates:
        return None
    return max(candidates, key=lambda c: c.arity)


class RuntimeInspector:
    """
    Adapter for discovering candidate types in live modules.

    Implements the IntrospectionPort interface using the inspect module.
    """

    def __init__(self, skip_unintrospectable: bool = False) -> None:
        """Initialize the runtime inspector.

        Args:
            skip_unintrospectable: Log and skip modules that cannot be read
                instead of aborting the run
        """
        self.skip_unintrospectable = skip_unintrospectable

    def discover_types(self, modules: Iterable[ModuleType]) -> list[TypeDescriptor]:
        """
        Discover candidate types across the given modules.

        Args:
            modules: Module catalog, inspected in the given order

        Returns:
            Candidate TypeDescriptors in module order, then class order

        Raises:
            IntrospectionError: If a module cannot be introspected and
                skipping is disabled
        """
        discovered: list[TypeDescriptor] = []

        for module in modules:
            try:
                module_types = self.discover_module_types(module)
            except IntrospectionError as e:
                if not self.skip_unintrospectable:
                    raise
                logger.warning(f"Skipping module that cannot be introspected: {e}")
                continue
            discovered.extend(module_types)

        logger.debug(f"Discovered {len(discovered)} candidate types")
        return discovered

    def discover_module_types(self, module: ModuleType) -> list[TypeDescriptor]:
        """Return candidate types defined in a single module, nested ones included."""
        module_name = getattr(module, "__name__", repr(module))
        try:
            namespace = list(vars(module).items())
        except TypeError as e:
            raise IntrospectionError(
                f"Failed to read namespace of module {module_name}: {e}"
            ) from e

        descriptors = []
        seen: set[int] = set()
        for attr_name, obj in namespace:
            try:
                if not inspect.isclass(obj) or obj.__module__ != module_name:
                    continue
                for cls in [obj, *self.nested_classes(obj)]:
                    # Aliases of an already described class
                    if id(cls) in seen:
                        continue
                    seen.add(id(cls))
                    if not self.is_concrete(cls):
                        continue
                    descriptor = self.describe_type(cls)
                    if descriptor is not None:
                        descriptors.append(descriptor)
            except IntrospectionError:
                raise
            except Exception as e:
                raise IntrospectionError(
                    f"Failed to introspect {module_name}.{attr_name}: {e}"
                ) from e
        return descriptors

    @classmethod
    def nested_classes(cls, outer: type) -> list[type]:
        """Classes defined in the body of ``outer``, depth first in definition order."""
        found = []
        prefix = f"{outer.__qualname__}."
        for value in vars(outer).values():
            # Class attributes that merely reference another class are skipped
            if (
                inspect.isclass(value)
                and value.__module__ == outer.__module__
                and value.__qualname__ == prefix + value.__name__
            ):
                found.append(value)
                found.extend(cls.nested_classes(value))
        return found

    @staticmethod
    def is_concrete(cls: type) -> bool:
        """Return True when the class is neither a protocol nor abstract."""
        if getattr(cls, "_is_protocol", False):
            return False
        return not inspect.isabstract(cls)

    def describe_type(self, cls: type) -> TypeDescriptor | None:
        """
        Build a TypeDescriptor for a class.

        Args:
            cls: Class to describe

        Returns:
            TypeDescriptor, or None if the class declares no public
            instance methods of its own
        """
        methods = [
            self.describe_method(name, func) for name, func in self.own_methods(cls)
        ]
        if not methods:
            return None

        return TypeDescriptor(
            name=cls.__name__,
            qualname=cls.__qualname__ if cls.__qualname__ != cls.__name__ else None,
            module=cls.__module__,
            methods=tuple(methods),
            constructor=select_primary_constructor(self.constructor_candidates(cls)),
        )

    @staticmethod
    def own_methods(cls: type) -> list[tuple[str, Callable[..., Any]]]:
        """
        Public instance methods declared in the class body, in order.

        Decorated methods count when the decorator keeps ``__wrapped__``
        pointing at the function, as ``functools.wraps`` and ``lru_cache`` do.
        """
        methods = []
        for name, value in vars(cls).items():
            if name.startswith("_") or isinstance(value, _NON_INSTANCE_MEMBERS):
                continue
            func = _unwrap_function(value)
            if func is not None:
                methods.append((name, func))
        return methods

    def describe_method(self, name: str, func: Callable[..., Any]) -> MethodDescriptor:
        """Describe a method, dropping the bound instance parameter."""
        signature = self._signature(func)
        hints = self._type_hints(func)
        return_annotation = hints.get("return", signature.return_annotation)

        return MethodDescriptor(
            name=name,
            parameters=self.describe_parameters(signature, hints, skip_first=True),
            returns_value=not _is_none_annotation(return_annotation),
        )

    def constructor_candidates(self, cls: type) -> list[ConstructorDescriptor]:
        """
        Enumerate constructor candidates for a class.

        ``__init__`` and ``__new__`` are candidates when overridden below
        ``object``; a class overriding neither has one implicit
        zero-parameter constructor. Hooks whose signature cannot be read are
        not candidates, so a class can end up with none.
        """
        overridden = [
            getattr(cls, hook)
            for hook in _CONSTRUCTOR_HOOKS
            if getattr(cls, hook) is not getattr(object, hook)
        ]
        if not overridden:
            return [ConstructorDescriptor()]

        candidates = []
        for hook in overridden:
            try:
                signature = inspect.signature(hook)
            except (TypeError, ValueError) as e:
                logger.debug(f"No signature for {cls.__qualname__} constructor: {e}")
                continue
            parameters = self.describe_parameters(
                signature, self._type_hints(hook), skip_first=True
            )
            candidates.append(ConstructorDescriptor(parameters=parameters))
        return candidates

    @staticmethod
    def describe_parameters(
        signature: inspect.Signature,
        hints: dict[str, Any],
        skip_first: bool = False,
    ) -> tuple[ParameterDescriptor, ...]:
        """Convert signature parameters into descriptors, skipping variadics."""
        params = list(signature.parameters.values())
        if skip_first and params and params[0].kind not in _VARIADIC_KINDS:
            params = params[1:]

        descriptors = []
        for param in params:
            if param.kind in _VARIADIC_KINDS:
                continue
            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = None
            kind = (
                ParameterKind.KEYWORD
                if param.kind is inspect.Parameter.KEYWORD_ONLY
                else ParameterKind.POSITIONAL
            )
            descriptors.append(
                ParameterDescriptor(
                    name=param.name,
                    type_name=annotation_name(annotation),
                    annotation=annotation,
                    kind=kind,
                    is_class=is_plain_class(annotation),
                )
            )
        return tuple(descriptors)

    @staticmethod
    def _signature(func: Callable[..., Any]) -> inspect.Signature:
        try:
            return inspect.signature(func)
        except (TypeError, ValueError) as e:
            raise IntrospectionError(
                f"Failed to read signature of {getattr(func, '__qualname__', func)}: {e}"
            ) from e

    @staticmethod
    def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
        """Resolve annotations, falling back to the raw ones on failure."""
        try:
            return typing.get_type_hints(func)
        except Exception as e:
            # Unresolvable forward references keep their string form
            logger.debug(
                f"Using raw annotations for {getattr(func, '__qualname__', func)}: {e}"
            )
            return {}
