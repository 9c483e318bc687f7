"""
Loading of working-container state.

Each working container keeps a state file in its container directory. A
container without one, or with state written by something else, is not a
builder.
"""
import json
import logging
from typing import List
from pydantic import ValidationError
from ..MODELS.storage_entities import BUILDER_STATE_TYPE, Builder
from ..UTILS.errors import StoreError

logger = logging.getLogger(__name__)

STATE_FILE = "bldr.json"


def open_builders(store) -> List[Builder]:
    """
    Loads the state of every working container in the store.

    :param store: The container store to walk.
    :return: Builders, in the store's container order.
    :raises StoreError: If the store cannot be listed or a state file cannot be read.
    """
    builders = []
    for container in store.containers():
        state_path = store.container_directory(container.id) / STATE_FILE
        try:
            with open(state_path, 'rb') as f:
                raw = f.read()
        except FileNotFoundError:
            continue
        except OSError as e:
            raise StoreError(f"error reading {state_path}: {e}") from e

        try:
            builder = Builder.model_validate(json.loads(raw))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
            logger.debug("ignoring unparsable state in %s", state_path)
            continue

        if builder.type != BUILDER_STATE_TYPE or builder.container_id != container.id:
            logger.debug("ignoring state in %s: not a working container", state_path)
            continue
        builders.append(builder)
    return builders
