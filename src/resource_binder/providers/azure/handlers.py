"""Azure Resource Manager resource handlers."""
from typing import Any, Dict, List

from azure.core.exceptions import ResourceNotFoundError as AzureResourceNotFoundError
from azure.mgmt.core.tools import parse_resource_id

from resource_binder.domain.schema.types import NUMBER, STRING, MapType, ObjectType
from resource_binder.infrastructure.logging.logger import get_logger
from resource_binder.providers.azure.azure_client import AzureClient
from resource_binder.providers.base.provider import ResourceHandler
from resource_binder.providers.base.resource_data import ResourceData
from resource_binder.providers.base.shaping import shape_native

logger = get_logger(__name__)

TAGS = MapType(element_type=STRING)


class ResourceGroupHandler(ResourceHandler):
    """Reads ``/subscriptions/{id}/resourceGroups/{name}``."""

    _schema = ObjectType(
        attributes={
            "id": STRING,
            "name": STRING,
            "location": STRING,
            "managed_by": STRING,
            "tags": TAGS,
        }
    )

    @property
    def resource_type(self) -> str:
        return "azurerm_resource_group"

    @property
    def schema(self) -> ObjectType:
        return self._schema

    def read(self, data: ResourceData, meta: Any) -> None:
        client: AzureClient = meta
        parsed = parse_resource_id(data.id)
        if "resource_group" not in parsed or "namespace" in parsed:
            raise ValueError(f"'{data.id}' is not a resource group ID")

        resource_groups = client.resource_client(parsed.get("subscription")).resource_groups
        try:
            group = resource_groups.get(parsed["resource_group"])
        except AzureResourceNotFoundError:
            logger.info("Resource group not found", resource_id=data.id)
            data.set_id("")
            return

        data.set_id(group.id)
        data.set("name", group.name)
        data.set("location", group.location)
        data.set("managed_by", group.managed_by)
        data.set("tags", group.tags)


class GenericResourceHandler(ResourceHandler):
    """
    Reads any ARM resource by its full ID.

    The API version comes from ``provider.options.api_versions`` when set for
    the resource type, otherwise from the newest stable version the resource
    provider namespace advertises. Resource-specific properties are kept as
    encoded JSON.
    """

    _schema = ObjectType(
        attributes={
            "id": STRING,
            "name": STRING,
            "type": STRING,
            "location": STRING,
            "kind": STRING,
            "managed_by": STRING,
            "tags": TAGS,
            "sku": ObjectType(
                attributes={
                    "name": STRING,
                    "tier": STRING,
                    "size": STRING,
                    "family": STRING,
                    "capacity": NUMBER,
                }
            ),
            "identity": ObjectType(
                attributes={
                    "type": STRING,
                    "principal_id": STRING,
                    "tenant_id": STRING,
                }
            ),
            "properties": STRING,
        }
    )

    @property
    def resource_type(self) -> str:
        return "azurerm_resource"

    @property
    def schema(self) -> ObjectType:
        return self._schema

    def read(self, data: ResourceData, meta: Any) -> None:
        client: AzureClient = meta
        parsed = parse_resource_id(data.id)
        if "namespace" not in parsed or "type" not in parsed:
            raise ValueError(f"'{data.id}' is not a provider resource ID")

        resource_client = client.resource_client(parsed.get("subscription"))
        api_version = self._api_version(client, resource_client, parsed)
        try:
            resource = resource_client.resources.get_by_id(data.id, api_version)
        except AzureResourceNotFoundError:
            logger.info("Resource not found", resource_id=data.id)
            data.set_id("")
            return

        payload = resource.as_dict()
        data.set_id(payload.get("id") or data.id)
        for name, attribute_type in self._schema.attributes.items():
            if name != "id" and name in payload:
                data.set(name, shape_native(payload[name], attribute_type))

    def _api_version(self, client: AzureClient, resource_client: Any, parsed: Dict[str, Any]) -> str:
        namespace = parsed["namespace"]
        type_path = "/".join(_type_segments(parsed))
        override = client.api_versions.get(f"{namespace}/{type_path}")
        if override:
            return override

        provider = resource_client.providers.get(namespace)
        for resource_type in provider.resource_types or []:
            if (resource_type.resource_type or "").lower() == type_path.lower():
                versions = list(resource_type.api_versions or [])
                stable = [version for version in versions if "preview" not in version.lower()]
                if stable or versions:
                    return (stable or versions)[0]
        raise ValueError(f"No API version found for resource type {namespace}/{type_path}")


def _type_segments(parsed: Dict[str, Any]) -> List[str]:
    segments = [parsed["type"]]
    level = 1
    while f"child_type_{level}" in parsed:
        segments.append(parsed[f"child_type_{level}"])
        level += 1
    return segments
