# Resolves listener identifiers to listener classes.

import importlib
import inspect
import logging
from typing import Dict, Mapping, Optional, Type

from event_dispatcher.contracts import ListenerContract
from event_dispatcher.exceptions import ListenerResolutionError, ListenerValidationError
from event_dispatcher.listeners import NullListener

logger = logging.getLogger(__name__)

# Aliases every default resolver knows about
DEFAULT_LISTENER_ALIASES: Dict[str, type] = {
    "NullListener": NullListener,
}

_REQUIRED_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


class ListenerResolver:
    """Maps listener identifiers to classes.

    An identifier is either an alias registered on the resolver (e.g. "NullListener")
    or a dotted import path of the form 'package.module.ClassName'. Aliases take
    precedence over import paths.
    """

    def __init__(self, aliases: Optional[Mapping[str, type]] = None) -> None:
        self._aliases: Dict[str, type] = dict(DEFAULT_LISTENER_ALIASES)
        for alias, listener_class in (aliases or {}).items():
            self.register(alias, listener_class)

    def register(self, alias: str, listener_class: type) -> None:
        """Register a class under an alias, replacing any previous class for that alias.

        The class is not checked against ListenerContract here; that happens when
        the alias is added to a dispatcher.
        """
        if not alias:
            raise ListenerValidationError("Listener alias must be a non-empty string.", listener=alias)
        if not isinstance(listener_class, type):
            raise ListenerValidationError(
                f"Listener alias [{alias}] must map to a class, got {type(listener_class).__name__}.",
                listener=alias,
            )
        self._aliases[alias] = listener_class
        logger.debug(f"Registered listener alias '{alias}' -> {listener_class.__qualname__}")

    def aliases(self) -> Dict[str, type]:
        """Return a copy of the alias table."""
        return dict(self._aliases)

    def resolve(self, identifier: str) -> Type:
        """
        Resolve a listener identifier to a class.

        Args:
            identifier: An alias or a dotted 'module.ClassName' path.

        Returns:
            The class the identifier refers to.

        Raises:
            ListenerResolutionError: If the identifier does not name any importable class.
        """
        if identifier in self._aliases:
            return self._aliases[identifier]

        try:
            module_path, class_name = identifier.rsplit(".", 1)
        except (AttributeError, ValueError):
            raise ListenerResolutionError(
                f"Unknown listener [{identifier}]. Expected a registered alias or 'module.path.ClassName'. "
                f"Available aliases: {sorted(self._aliases)}",
                listener=identifier,
            )

        # Relative or empty module paths cannot be imported by absolute name.
        if not class_name or not all(module_path.split(".")):
            raise ListenerResolutionError(
                f"Invalid listener path [{identifier}]. Expected format: 'module.path.ClassName'",
                listener=identifier,
            )

        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            logger.error(f"Failed to import listener module '{module_path}': {e}")
            raise ListenerResolutionError(
                f"Could not import listener module '{module_path}' for listener [{identifier}].",
                listener=identifier,
            ) from e

        listener_class = getattr(module, class_name, None)
        if listener_class is None:
            raise ListenerResolutionError(
                f"Listener class '{class_name}' not found in module '{module_path}'.",
                listener=identifier,
            )
        if not isinstance(listener_class, type):
            raise ListenerResolutionError(
                f"Listener [{identifier}] does not refer to a class.",
                listener=identifier,
            )
        return listener_class

    def ensure_listener(self, identifier: str) -> Type[ListenerContract]:
        """Resolve an identifier and check that it implements ListenerContract.

        Raises:
            ListenerResolutionError: If the identifier cannot be resolved.
            ListenerValidationError: If the class does not implement ListenerContract.
        """
        listener_class = self.resolve(identifier)
        if not issubclass(listener_class, ListenerContract):
            logger.warning(f"Rejected listener [{identifier}]: {listener_class.__qualname__} is not a ListenerContract")
            raise ListenerValidationError(
                f"Listeners must implement the ListenerContract, passed in listener, [{identifier}].",
                listener=identifier,
            )
        return listener_class

    def ensure_instantiable(self, identifier: str) -> Type:
        """Resolve an identifier and check that it can be constructed with no arguments.

        Raises:
            ListenerResolutionError: If the identifier cannot be resolved.
            ListenerValidationError: If the class is abstract or its constructor requires arguments.
        """
        listener_class = self.resolve(identifier)
        if inspect.isabstract(listener_class):
            raise ListenerValidationError(
                f"Passed through class is not an instantiable class [{identifier}]: it is abstract.",
                listener=identifier,
            )

        try:
            parameters = inspect.signature(listener_class).parameters.values()
        except (TypeError, ValueError):
            # No introspectable signature; construction itself will tell.
            return listener_class

        required = [p.name for p in parameters if p.kind in _REQUIRED_PARAMETER_KINDS and p.default is p.empty]
        if required:
            raise ListenerValidationError(
                f"Passed through class is not an instantiable class [{identifier}]: "
                f"constructor requires {', '.join(required)}.",
                listener=identifier,
            )
        return listener_class
