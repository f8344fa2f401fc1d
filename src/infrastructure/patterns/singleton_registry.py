"""Singleton registry - one lazily created instance per class, process wide."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding the single instance of each registered class.

    Instances are created on first request and live until the process
    exits. Creation is guarded by double-checked locking so concurrent
    first access still yields exactly one instance.

    Thread-safe singleton implementation.
    """

    _instance: Optional['SingletonRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'SingletonRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize singleton registry."""
        if hasattr(self, '_initialized'):
            return

        self._instances: Dict[Type, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Singleton registry initialized")

    @classmethod
    def get_instance(cls) -> 'SingletonRegistry':
        """Get the registry itself."""
        return cls()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, creating it on first access.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only when creating the instance
            **kwargs: Constructor keyword arguments, used only when creating the instance

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._registry_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self.logger.debug(f"Created singleton instance of {singleton_class.__name__}")
        return cast(T, instance)

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of the class has been created."""
        return singleton_class in self._instances

    def reset(self) -> None:
        """Drop every instance. Intended for tests."""
        with self._registry_lock:
            self._instances.clear()
            self.logger.debug("Singleton registry reset")
