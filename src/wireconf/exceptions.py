class WireconfError(Exception):
    """Represent a base class for all wireconf-specific failures.

    Catch this type when you want to handle any wireconf error path without
    matching each concrete exception class individually.
    """


class InvalidConfigurationError(WireconfError):
    """Signal that a configuration cannot be produced or rendered.

    Raised by ``DependencyGraphBuilder.build`` when a required constructor
    parameter has no class or interface type hint and neither
    ``ignore_unresolved`` nor an already-registered service applies, and by
    ``FactoryMappingMerger.merge_all`` when a configuration section has an
    unexpected type.

    Typical fixes include annotating the parameter with a concrete class,
    giving it a default value, or registering the service explicitly.
    """


class ClassNotFoundError(InvalidConfigurationError):
    """Signal that a class name does not import to a runtime class.

    Raised by ``DependencyGraphBuilder.build`` for the requested root class.
    Dependencies whose names cannot be loaded are recorded without recursion
    instead.
    """


class CyclicDependencyError(InvalidConfigurationError):
    """Signal a cycle in required constructor dependencies.

    Raised when a class is reached again while its own dependencies are still
    being resolved, for example ``A(b: B)`` with ``B(a: A)``.

    Typical fixes include making one side of the cycle optional or replacing
    it with a lazily resolved dependency.
    """

    def __init__(self, path: tuple[str, ...]) -> None:
        self.path = path
        super().__init__(f"Cyclic dependency detected: {' -> '.join(path)}")
