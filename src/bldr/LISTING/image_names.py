"""
Resolution of image IDs to display names.
"""
import logging
from typing import Dict

logger = logging.getLogger(__name__)

# Displayed for containers that were not created from an image.
BASE_IMAGE_FAKE_NAME = "scratch"


class ImageNameResolver:
    """
    Maps image IDs to the first name recorded for the image, asking the store
    at most once per ID. Create one per listing; names are not shared between
    listings because images can be retagged in between.
    """
    def __init__(self, store):
        """
        :param store: Store providing ``image(image_id)``.
        """
        self.store = store
        self.lookups = 0
        self._names: Dict[str, str] = {}

    def resolve(self, image_id: str) -> str:
        """
        Returns the display name for an image.

        An image that cannot be found, or has no names, resolves to an empty
        string rather than failing the listing.

        :param image_id: The image ID, or an empty string for no image.
        :return: The display name.
        """
        if not image_id:
            return BASE_IMAGE_FAKE_NAME
        if image_id in self._names:
            return self._names[image_id]

        self.lookups += 1
        name = ""
        try:
            image = self.store.image(image_id)
        except Exception as e:
            logger.debug("no name for image %s: %s", image_id, e)
        else:
            if image.names:
                name = image.names[0]
        self._names[image_id] = name
        return name
