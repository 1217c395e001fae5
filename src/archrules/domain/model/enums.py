"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Declared access modifier of a class or member."""

    PUBLIC = auto()
    PROTECTED = auto()
    PACKAGE_PRIVATE = auto()  # no modifier
    PRIVATE = auto()


class UnitKind(Enum):
    """Kind of unit a rule pipeline evaluates.

    A rule evaluates exactly one kind, never a mix.
    """

    CLASS = "classes"
    METHOD = "methods"
    FIELD = "fields"


class DependencyOrigin(Enum):
    """Where a class-to-class dependency edge comes from."""

    FIELD_TYPE = "field type"
    METHOD_SIGNATURE = "method signature"
    ANNOTATION = "annotation"
    INHERITANCE = "inheritance"
    ACCESS = "access"


class AccessKind(Enum):
    """Who may depend on a layer."""

    UNREACHABLE = auto()  # no other layer
    ONLY_BY = auto()  # listed layers only
    UNRESTRICTED = auto()  # any layer
