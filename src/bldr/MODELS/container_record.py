"""
Models for the rows produced by a container listing.
"""
from pydantic import BaseModel, ConfigDict, Field


class ContainerRecord(BaseModel):
    """
    One listed container, with its base image resolved to a display name.

    Serialized field names (``id``, ``builder``, ``imageid``, ``imagename``,
    ``containername``) are what the JSON output carries.
    """
    container_id: str = Field(alias="id")
    builder: bool = False
    image_id: str = Field(default="", alias="imageid")
    image_name: str = Field(default="", alias="imagename")
    container_name: str = Field(default="", alias="containername")

    model_config = ConfigDict(populate_by_name=True)
