"""
JSON output for container listings.
"""
import json
from typing import List
from ..MODELS.container_record import ContainerRecord


def format_json(records: List[ContainerRecord]) -> str:
    """
    Formats all records as one indented JSON array.

    :param records: Records to format, in output order.
    :return: The JSON document. An empty listing is ``[]``.
    """
    return json.dumps([r.model_dump(by_alias=True) for r in records], indent=4, ensure_ascii=False)
