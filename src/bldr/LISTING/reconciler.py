"""
Reconciliation of working containers with the containers in storage.
"""
from typing import Callable, List, Optional
from ..MODELS.container_record import ContainerRecord
from ..STORAGE.builder_state import open_builders
from ..UTILS.errors import ListingError
from .image_names import ImageNameResolver


def list_containers(store,
                    all_containers: bool = False,
                    resolver: Optional[ImageNameResolver] = None,
                    builders: Callable = open_builders) -> List[ContainerRecord]:
    """
    Lists working containers, or every container in the store.

    Working containers are always flagged as builders. When listing every
    container, each storage container appears once and is flagged as a
    builder only if a working container has its ID.

    :param store: The container store.
    :param all_containers: Also list containers that are not working containers.
    :param resolver: Image name resolver. A fresh one is created if omitted.
    :param builders: Loader returning the working containers of a store.
    :return: Records in the order of the underlying source.
    :raises ListingError: If working containers or storage containers cannot be listed.
    """
    if resolver is None:
        resolver = ImageNameResolver(store)

    try:
        working = builders(store)
    except Exception as e:
        raise ListingError("error reading build containers", e) from e

    if not all_containers:
        return [
            ContainerRecord(
                container_id=b.container_id,
                builder=True,
                image_id=b.from_image_id,
                image_name=resolver.resolve(b.from_image_id),
                container_name=b.container,
            )
            for b in working
        ]

    ours = {b.container_id for b in working}
    try:
        containers = store.containers()
    except Exception as e:
        raise ListingError("error reading list of all containers", e) from e

    records = []
    for container in containers:
        records.append(ContainerRecord(
            container_id=container.id,
            builder=container.id in ours,
            image_id=container.image_id,
            image_name=resolver.resolve(container.image_id),
            container_name=container.names[0] if container.names else "",
        ))
    return records
