# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Read-only access to the content-addressed container store.

The store keeps one JSON index of containers and one of images under its
root directory, each in a directory named after the storage driver::

    <root>/<driver>-containers/containers.json
    <root>/<driver>-containers/<id>/userdata/
    <root>/<driver>-images/images.json
"""

import json
import logging
from typing import Any, List
from pathlib import Path

from pydantic import ValidationError

from ..MODELS.storage_entities import StorageContainer, StorageImage
from ..PARSERS.storage_conf_parser import StoreOptions
from ..UTILS.errors import ImageUnknownError, StoreError

logger = logging.getLogger(__name__)


class ContainerStore:
    """
    Reads containers and images from a store laid out by a storage driver.
    Nothing here writes to the store.
    """

    def __init__(self, options: StoreOptions):
        """
        Initialize the store.

        Args:
            options: Store root and driver name.
        """
        self.options = options
        self.root = Path(options.root)
        self.containers_dir = self.root / f"{options.driver}-containers"
        self.images_dir = self.root / f"{options.driver}-images"
        self.containers_file = self.containers_dir / "containers.json"
        self.images_file = self.images_dir / "images.json"

    def _load_index(self, index_file: Path) -> List[Any]:
        """Load one JSON index from disk. A missing index is an empty store."""
        if not index_file.exists():
            logger.debug("index %s does not exist, treating as empty", index_file)
            return []
        try:
            with open(index_file, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"error parsing {index_file}: {e}") from e
        except OSError as e:
            raise StoreError(f"error reading {index_file}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreError(f"error parsing {index_file}: expected a list")
        return data

    def containers(self) -> List[StorageContainer]:
        """
        List every container in the store, in index order.

        Returns:
            List of StorageContainer objects
        """
        try:
            return [StorageContainer.model_validate(entry)
                    for entry in self._load_index(self.containers_file)]
        except ValidationError as e:
            raise StoreError(f"error parsing {self.containers_file}: {e}") from e

    def images(self) -> List[StorageImage]:
        """
        List every image in the store, in index order.

        Returns:
            List of StorageImage objects
        """
        try:
            return [StorageImage.model_validate(entry)
                    for entry in self._load_index(self.images_file)]
        except ValidationError as e:
            raise StoreError(f"error parsing {self.images_file}: {e}") from e

    def image(self, image: str) -> StorageImage:
        """
        Get an image by ID, or failing that by one of its names.

        Args:
            image: Image ID or name

        Returns:
            The matching StorageImage

        Raises:
            ImageUnknownError: If no image matches
        """
        images = self.images()
        for candidate in images:
            if candidate.id == image:
                return candidate
        for candidate in images:
            if image in candidate.names:
                return candidate
        raise ImageUnknownError(image)

    def container_directory(self, container_id: str) -> Path:
        """Get the per-container data directory."""
        return self.containers_dir / container_id / "userdata"


def get_store(options: StoreOptions) -> ContainerStore:
    """
    Open the store described by ``options``.
    """
    logger.debug("using store root %s with driver %s", options.root, options.driver)
    return ContainerStore(options)
