# ABOUTME: Shared contract checks for notifier interfaces
# ABOUTME: Subclasses name an interface and its implementations to get structural checks for free

import inspect
from abc import ABC, abstractmethod
from typing import Generic, List, Type, TypeVar

import pytest

T = TypeVar("T", bound=ABC)


class ContractTestBase(Generic[T]):
    """Structural checks every implementation of an interface must pass."""

    @property
    @abstractmethod
    def interface_class(self) -> Type[T]:
        pass

    @property
    @abstractmethod
    def implementations(self) -> List[Type[T]]:
        pass

    def abstract_methods(self) -> List[str]:
        return sorted(self.interface_class.__abstractmethods__)

    @pytest.mark.contract
    def test_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            self.interface_class()

    @pytest.mark.contract
    def test_implementations_are_concrete_subclasses(self):
        for impl_class in self.implementations:
            assert issubclass(impl_class, self.interface_class)
            assert not inspect.isabstract(impl_class), f"{impl_class.__name__} leaves abstract methods"

    @pytest.mark.contract
    def test_methods_match_interface(self):
        """Parameter names, return annotation and sync/async kind follow the interface."""
        for impl_class in self.implementations:
            for name in self.abstract_methods():
                expected = getattr(self.interface_class, name)
                actual = getattr(impl_class, name)
                expected_sig, actual_sig = inspect.signature(expected), inspect.signature(actual)

                assert list(expected_sig.parameters) == list(actual_sig.parameters), f"{impl_class.__name__}.{name}"
                assert expected_sig.return_annotation == actual_sig.return_annotation, f"{impl_class.__name__}.{name}"
                assert inspect.iscoroutinefunction(expected) == inspect.iscoroutinefunction(actual), (
                    f"{impl_class.__name__}.{name} must keep the interface's sync/async kind"
                )
