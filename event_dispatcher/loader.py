# Loads dispatcher registrations from serialized data.

import json
import logging
from typing import Dict, List, Optional

from event_dispatcher.dispatcher import Dispatcher
from event_dispatcher.exceptions import RegistrationLoadError
from event_dispatcher.resolver import ListenerResolver
from event_dispatcher.settings import Settings

logger = logging.getLogger(__name__)


def load_registrations_from_file(filepath: str) -> Dict[str, List[str]]:
    """
    Read a registration table from a JSON file.

    The file holds either {"listeners": {"<event>": ["<listener>", ...]}} or the
    bare event-to-listeners mapping.

    Raises:
        RegistrationLoadError: If the file cannot be read or does not have the expected shape.
    """
    try:
        with open(filepath, "r") as f:
            raw_data = json.load(f)
    except OSError as e:
        raise RegistrationLoadError(f"Could not read registration file {filepath}: {e}") from e
    except json.JSONDecodeError as e:
        raise RegistrationLoadError(f"Registration file {filepath} is not valid JSON: {e}") from e

    if isinstance(raw_data, dict) and "listeners" in raw_data:
        raw_data = raw_data["listeners"]

    if not isinstance(raw_data, dict):
        raise RegistrationLoadError(
            f"Registrations loaded from {filepath} must be a dictionary, got {type(raw_data).__name__}"
        )

    registrations: Dict[str, List[str]] = {}
    for name, listeners in raw_data.items():
        if not isinstance(listeners, list) or not all(isinstance(item, str) for item in listeners):
            raise RegistrationLoadError(
                f"Listeners for event '{name}' in {filepath} must be a list of strings.",
                event_name=name,
            )
        registrations[name] = listeners
    return registrations


def load_dispatcher_from_file(
    filepath: str, resolver: Optional[ListenerResolver] = None, strict: bool = True
) -> Dispatcher:
    """Build a Dispatcher seeded from a JSON registration file."""
    registrations = load_registrations_from_file(filepath)
    dispatcher = Dispatcher.make(registrations, resolver=resolver, strict=strict)
    logger.info(f"Loaded {len(registrations)} event registrations from {filepath}")
    return dispatcher


def load_dispatcher(settings: Settings, resolver: Optional[ListenerResolver] = None) -> Dispatcher:
    """
    Build a Dispatcher from the configured registration file.

    Returns an empty Dispatcher when EVENT_LISTENERS_FILEPATH is not set.
    """
    filepath = settings.get_listeners_filepath()
    if not filepath:
        logger.warning("EVENT_LISTENERS_FILEPATH is not set. Starting with an empty dispatcher.")
        return Dispatcher.make(resolver=resolver)
    return load_dispatcher_from_file(filepath, resolver=resolver, strict=settings.get_strict_registration())
