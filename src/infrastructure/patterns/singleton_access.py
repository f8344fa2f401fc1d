"""Standard singleton access functions."""

from typing import TypeVar, Type, Any

from src.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Get the process-wide instance of a class.

    The first call constructs the instance with the given arguments; later
    calls ignore their arguments and return that same instance.

    Args:
        singleton_class: The class to get an instance of
        *args: Constructor arguments for the first call
        **kwargs: Constructor keyword arguments for the first call

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
