"""Cloud Control resource handler."""
import json
from typing import Any

from resource_binder.domain.schema.types import ObjectType
from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.aws.aws_client import AWSClient
from resource_binder.providers.base.provider import ResourceHandler
from resource_binder.providers.base.resource_data import ID_ATTRIBUTE, ResourceData
from resource_binder.providers.base.shaping import shape_native

logger = get_logger(__name__)


class CloudControlResourceHandler(ResourceHandler):
    """Reads any registry resource type through the Cloud Control API."""

    # Cloud Control may return read-only properties newer than the cached schema
    ignore_unknown_attributes = True

    def __init__(self, type_name: str, schema: ObjectType):
        self._type_name = type_name
        self._schema = schema

    @property
    def resource_type(self) -> str:
        return self._type_name

    @property
    def schema(self) -> ObjectType:
        return self._schema

    def read(self, data: ResourceData, meta: Any) -> None:
        client: AWSClient = meta
        description = client.get_resource(self._type_name, data.id)
        if description is None:
            logger.info("Resource not found", resource_type=self._type_name, resource_id=data.id)
            data.set_id("")
            return

        properties = json.loads(description.get("Properties") or "{}")
        data.set_id(description.get("Identifier") or data.id)
        for name, attribute_type in self._schema.attributes.items():
            if name == ID_ATTRIBUTE or name not in properties:
                continue
            data.set(name, shape_native(properties[name], attribute_type))
