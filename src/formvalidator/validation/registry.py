"""Validator registry for formvalidator.

Provides registration and lookup for:
- Built-in validators (shipped with the library)
- Custom validators (application-specific, registered at any time)

Config builders never see the live registry. They receive a
RegistrySnapshot taken when the form is attached, so registrations made
afterwards only affect forms attached later.
"""

import logging
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from formvalidator.validation.types import UnknownValidatorError, ValidatorFactory

logger = logging.getLogger(__name__)


class RegistrySnapshot(Mapping[str, ValidatorFactory]):
    """Read-only view of the registered factories at one point in time.

    Factories are available by key or as attributes:

        snapshot["minLength"](2)
        snapshot.minLength(2)
    """

    def __init__(self, factories: Mapping[str, ValidatorFactory]):
        self._factories = MappingProxyType(dict(factories))

    def __getitem__(self, name: str) -> ValidatorFactory:
        if name not in self._factories:
            raise UnknownValidatorError(name, sorted(self._factories))
        return self._factories[name]

    def __getattr__(self, name: str) -> ValidatorFactory:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except UnknownValidatorError as e:
            raise AttributeError(str(e)) from e

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def get(self, name: str, default: Any = None) -> Any:
        return self._factories.get(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"RegistrySnapshot({sorted(self._factories)})"


class ValidatorRegistry:
    """Registry of validator factories keyed by name.

    Registering under an existing name replaces the previous factory
    (last write wins). There is no removal; use a fresh registry instead.

    Example:
        registry = ValidatorRegistry()
        registry.register("postcode", postcode_factory)
        factory = registry.resolve("postcode")
    """

    def __init__(self, factories: Mapping[str, ValidatorFactory] | None = None):
        self._factories: dict[str, ValidatorFactory] = dict(factories or {})

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Register a validator factory by name, replacing any existing one.

        Args:
            name: Identifier used by config builders (e.g. "minLength")
            factory: Callable taking the rule's arguments and returning a Validator
        """
        if name in self._factories:
            logger.debug("Replacing validator factory '%s'", name)
        self._factories[name] = factory

    def resolve(self, name: str) -> ValidatorFactory:
        """Get a registered factory by name.

        Raises:
            UnknownValidatorError: If nothing is registered under the name
        """
        if name not in self._factories:
            raise UnknownValidatorError(name, self.list_registered())
        return self._factories[name]

    def is_registered(self, name: str) -> bool:
        """Check if a validator is registered."""
        return name in self._factories

    def list_registered(self) -> list[str]:
        """List all registered validator names."""
        return sorted(self._factories)

    def snapshot(self) -> RegistrySnapshot:
        """Freeze the current registrations for a config builder."""
        return RegistrySnapshot(self._factories)


_default_registry: ValidatorRegistry | None = None


def default_registry() -> ValidatorRegistry:
    """The process-wide registry, created with the built-ins on first use."""
    global _default_registry
    if _default_registry is None:
        from formvalidator.validation.validators import register_builtin_validators

        registry = ValidatorRegistry()
        register_builtin_validators(registry)
        _default_registry = registry
    return _default_registry


def register_validator(name: str, factory: ValidatorFactory) -> None:
    """Register a custom validator on the process-wide registry."""
    default_registry().register(name, factory)


def reset_default_registry() -> None:
    """Drop custom registrations from the process-wide registry. Primarily for testing."""
    global _default_registry
    _default_registry = None
