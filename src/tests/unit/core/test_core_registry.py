import pytest

from ftmspy.core.exceptions import RegistryError, RepeatedIdError
from ftmspy.core.registry import Registry


class Entry:
    pass


class TestRegistry:
    @pytest.fixture
    def registry(self) -> Registry[Entry]:
        return Registry("test")

    def test_register_and_get(self, registry: Registry[Entry]):
        registry.register(Entry)
        assert registry.get("Entry") is Entry
        assert "Entry" in registry

    def test_register_as_decorator_returns_class(self, registry: Registry[Entry]):
        @registry.register
        class Decorated(Entry):
            pass

        assert registry.get("Decorated") is Decorated

    def test_register_repeated_entry_raises_error(self, registry: Registry[Entry]):
        registry.register(Entry)
        with pytest.raises(RepeatedIdError):
            registry.register(Entry)

    def test_get_missing_entry_raises_error(self, registry: Registry[Entry]):
        with pytest.raises(RegistryError):
            registry.get("Entry")

    def test_list_entries(self, registry: Registry[Entry]):
        registry.register(Entry)
        assert registry.list_entries() == ["Entry"]

    def test_calc_operators_are_listed_in_operator_registry(self):
        import ftmspy.calc  # noqa: F401
        from ftmspy.core.registry import operator_registry

        assert "DBECalculator" in operator_registry
        assert "KendrickCalculator" in operator_registry.list_entries()
