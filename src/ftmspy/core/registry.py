"""Registry of operator classes, used to rebuild pipelines from their serialized form."""

from typing import Generic, TypeVar

from .exceptions import RegistryError, RepeatedIdError

T = TypeVar("T")


class Registry(Generic[T]):
    """Map class names to classes.

    Pipelines are serialized storing the class name of each operator, e.g. ``"DBECalculator"``. The
    registry is used to find the operator class when a pipeline is deserialized.

    :param name: the registry name, used in error messages.

    """

    def __init__(self, name: str):
        self._name = name
        self._records: dict[str, type[T]] = dict()

    def __contains__(self, id_: str) -> bool:
        return id_ in self._records

    def get(self, id_: str) -> type[T]:
        """Retrieve a registered class by its name.

        :raises RegistryError: if no class was registered with this name.

        """
        if id_ not in self._records:
            raise RegistryError(f"Class `{id_}` not found in {self._name} registry.")
        return self._records[id_]

    def list_entries(self) -> list[str]:
        """List the names of all registered classes, in alphabetical order."""
        return sorted(self._records)

    def register(self, entry: type[T]) -> type[T]:
        """Register a class using its name.

        Meant to be used as a class decorator on concrete operators, e.g.
        ``@operator_registry.register`` on :py:class:`ftmspy.calc.DBECalculator`.

        :raises RepeatedIdError: if a class with the same name is already registered.

        """
        id_ = entry.__name__
        if id_ in self._records:
            raise RepeatedIdError(f"Class `{id_}` is already registered in {self._name} registry.")

        self._records[id_] = entry
        return entry


operator_registry: Registry = Registry("operator")
"""Registry of compound calculation operators."""
