"""
Fixed-width table output for container listings.
"""
from typing import List
from ..MODELS.container_record import ContainerRecord

HEADINGS = ("CONTAINER ID", "BUILDER", "IMAGE ID", "IMAGE NAME", "CONTAINER NAME")
BUILDER_MARK = "   *"


def _truncated_row(container_id, builder, image_id, image_name, container_name) -> str:
    return f"{container_id[:12]:<12}  {builder:<8} {image_id[:12]:<12} {image_name:<32} {container_name}"


def _full_row(container_id, builder, image_id, image_name, container_name) -> str:
    return f"{container_id:<64} {builder:<8} {image_id:<64} {image_name:<32} {container_name}"


def format_table(records: List[ContainerRecord],
                 quiet: bool = False,
                 noheading: bool = False,
                 truncate: bool = True) -> List[str]:
    """
    Formats records as table lines.

    The heading goes out with the first row, so an empty listing produces no
    lines at all. In quiet mode only container IDs are printed.

    :param records: Records to format, in output order.
    :param quiet: Print only container IDs.
    :param noheading: Omit the heading line.
    :param truncate: Clip IDs to 12 characters instead of padding them to 64.
    :return: Output lines, without trailing newlines.
    """
    row = _truncated_row if truncate else _full_row
    lines = []
    for n, record in enumerate(records):
        if n == 0 and not noheading and not quiet:
            lines.append(row(*HEADINGS))
        if quiet:
            lines.append(record.container_id)
            continue
        lines.append(row(
            record.container_id,
            BUILDER_MARK if record.builder else "",
            record.image_id,
            record.image_name,
            record.container_name,
        ))
    return lines
