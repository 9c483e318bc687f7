"""
Models for the containers, images and working-container state held in storage.
Field aliases follow the keys used in the on-disk JSON files.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Marks a state file as written by this tool.
BUILDER_STATE_TYPE = "bldr 0.0.1"


class StorageContainer(BaseModel):
    """
    A container as recorded in the store's container index.
    """
    id: str
    names: List[str] = []
    image_id: str = Field(default="", alias="image")
    layer: str = ""
    metadata: str = ""
    created: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class StorageImage(BaseModel):
    """
    An image as recorded in the store's image index.
    """
    id: str
    names: List[str] = []
    top_layer: str = Field(default="", alias="layer")
    digest: str = ""
    created: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Builder(BaseModel):
    """
    State of a working container, kept in its container directory.
    """
    type: str = ""
    from_image: str = Field(default="", alias="image")
    from_image_id: str = Field(default="", alias="image-id")
    container: str = Field(default="", alias="container-name")
    container_id: str = Field(default="", alias="container-id")
    mount_point: str = Field(default="", alias="mountpoint")

    model_config = ConfigDict(populate_by_name=True)
