"""Entity base class.

Subclasses declare fields as class attributes (see ``open_rtb.schema.fields``)
and get builder-style accessors generated at class creation:

    get_<field>()         -> stored value or None
    set_<field>(value)    -> validates, stores, returns self
    add_<field>(value)    -> arrays and collections: validates one element,
                             appends it, returns self

Serialization is delegated entirely to the projector.
"""

from __future__ import annotations

from typing import Any, ClassVar

from open_rtb.core.collection import ArrayCollection
from open_rtb.core.config import DEFAULT_CONFIG, SerializationConfig
from open_rtb.core.exceptions import InvalidValue
from open_rtb.schema.describer import describe
from open_rtb.schema.fields import Field, FieldKind, _caller_line
from open_rtb.schema.projector import project

_ROOT_ENTITIES: dict[str, type[Entity]] = {}


def root_entities() -> dict[str, type[Entity]]:
    """Top-level entity classes (bid request/response, native request/response) by name."""
    return dict(_ROOT_ENTITIES)


def _make_getter(declaration: Field) -> Any:
    def getter(self: Entity) -> Any:
        return declaration.read(self)

    return getter


def _make_setter(declaration: Field, method: str) -> Any:
    def setter(self: Entity, value: Any) -> Entity:
        self._store(declaration, value, method, _caller_line())
        return self

    return setter


def _make_adder(declaration: Field, method: str) -> Any:
    if declaration.kind is FieldKind.COLLECTION:

        def add_element(self: Entity, value: Any = None) -> Entity:
            if value is None:
                value = declaration.target()  # type: ignore[misc]
            self._append(declaration, value, method, _caller_line())
            return self

        return add_element

    def add_item(self: Entity, value: Any) -> Entity:
        self._append(declaration, value, method, _caller_line())
        return self

    return add_item


def _install(cls: type, method: str, function: Any, doc: str) -> None:
    if method in vars(cls):
        return
    function.__name__ = method
    function.__qualname__ = f"{cls.__qualname__}.{method}"
    function.__module__ = cls.__module__
    function.__doc__ = doc
    setattr(cls, method, function)


class Entity:
    """Base for every OpenRTB object.

    Keyword arguments to the constructor are assigned through the same
    validation as the setters.
    """

    root: ClassVar[bool] = False

    def __init_subclass__(cls, root: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.root = root
        if root:
            _ROOT_ENTITIES[cls.__name__] = cls
        for name, attribute in list(vars(cls).items()):
            if not isinstance(attribute, Field):
                continue
            _install(cls, f"get_{name}", _make_getter(attribute), f"Return {name}.")
            _install(
                cls,
                f"set_{name}",
                _make_setter(attribute, f"set_{name}"),
                f"Validate and set {name}.",
            )
            if attribute.is_array:
                _install(
                    cls,
                    f"add_{name}",
                    _make_adder(attribute, f"add_{name}"),
                    f"Validate and append one {name} element.",
                )

    def __init__(self, **values: Any) -> None:
        for descriptor in describe(type(self)).properties.values():
            if descriptor.kind is FieldKind.COLLECTION:
                self.__dict__[descriptor.name] = ArrayCollection(descriptor.target)
            elif descriptor.kind is FieldKind.ENTITY and descriptor.init:
                self.__dict__[descriptor.name] = descriptor.target()  # type: ignore[misc]
        for name, value in values.items():
            declaration = getattr(type(self), name, None)
            if not isinstance(declaration, Field):
                raise TypeError(f"{type(self).__name__} has no field '{name}'")
            self._store(declaration, value, "__init__", _caller_line())

    def _store(self, declaration: Field, value: Any, method: str, line: int | None) -> None:
        try:
            cleaned = declaration.clean(value)
        except InvalidValue as exc:
            raise exc.with_trace(declaration.owner or type(self), method, line)
        self.__dict__[declaration.name] = cleaned

    def _append(self, declaration: Field, value: Any, method: str, line: int | None) -> None:
        try:
            cleaned = declaration.clean_element(value)
        except InvalidValue as exc:
            raise exc.with_trace(declaration.owner or type(self), method, line)
        current = self.__dict__.get(declaration.name)
        if declaration.kind is FieldKind.COLLECTION:
            if current is None:
                current = self.__dict__[declaration.name] = ArrayCollection(declaration.target)
            current.add(cleaned)
        elif current is None:
            self.__dict__[declaration.name] = [cleaned]
        else:
            current.append(cleaned)

    def to_dict(self) -> dict[str, Any]:
        """Structural Result: populated fields only, keyed by wire name.

        Raises:
            MissingRequiredField: If a required field is empty.
        """
        return project(self)

    def serialize(self, config: SerializationConfig | None = None) -> str:
        """Encode the Structural Result as JSON text."""
        return (config or DEFAULT_CONFIG).dumps(self.to_dict())

    def __repr__(self) -> str:
        populated = ", ".join(
            f"{name}={value!r}"
            for name, value in self.__dict__.items()
            if value is not None and not (isinstance(value, ArrayCollection) and not value)
        )
        return f"{type(self).__name__}({populated})"
