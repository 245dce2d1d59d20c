# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Create/Get/Update/Delete shape shared by every resource kind.

    create : POST   <api>/process-groups/<parent-id>/<collection>
    get    : GET    <api>/<collection>/<id>
    update : PUT    <api>/<collection>/<id>
    delete : DELETE <api>/<collection>/<id>[?version=<n>]

None of these modify the entity they are given. Create/Update return the entity decoded from the server response,
Get returns None when the server reports the resource as absent and Delete treats an absent resource as already
deleted.
"""

import logging
from typing import TYPE_CHECKING, Optional, Type, TypeVar

from nififlow.core.call import HTTP_NOT_FOUND, CallResponse
from nififlow.core.errors import APIError, DecodeError
from nififlow.core.resources.common import ResourceEntity

if TYPE_CHECKING:
    from nififlow.core.client import NiFiClient

logger = logging.getLogger(__name__)

PROCESS_GROUPS_COLLECTION = "process-groups"

_ResourceEntityType = TypeVar("_ResourceEntityType", bound=ResourceEntity)


def create_resource(client: "NiFiClient", collection: str, entity: _ResourceEntityType) -> _ResourceEntityType:
    url = client.config.url(PROCESS_GROUPS_COLLECTION, entity.parent_group_id, collection)
    response = client.json_call("POST", url, entity.for_creation(), type(entity)).raise_for_failure()
    created = _expect_entity(response, "POST", url)
    logger.info(f"Created {type(entity).__name__} {created.id!r} in process group {entity.parent_group_id!r}.")
    return created


def get_resource(client: "NiFiClient", collection: str, entity_type: Type[_ResourceEntityType], resource_id: str) -> Optional[_ResourceEntityType]:
    url = client.config.url(collection, resource_id)
    response = client.json_call("GET", url, None, entity_type).raise_for_failure()
    if response.is_not_found:
        logger.debug(f"{entity_type.__name__} {resource_id!r} not found.")
        return None
    return _expect_entity(response, "GET", url)


def update_resource(client: "NiFiClient", collection: str, entity: _ResourceEntityType) -> _ResourceEntityType:
    url = client.config.url(collection, entity.id)
    response = client.json_call("PUT", url, entity, type(entity)).raise_for_failure()
    return _expect_entity(response, "PUT", url)


def delete_resource(client: "NiFiClient", collection: str, resource_id: str, version: Optional[int] = None) -> bool:
    """Returns False if the resource was already absent, True if it got deleted by this call."""
    url = client.config.url(collection, resource_id)
    params = {"version": version} if version is not None else None
    response = client.json_call("DELETE", url, None, None, params).raise_for_failure()
    if response.is_not_found:
        logger.info(f"Resource {resource_id!r} in {collection!r} is already absent, nothing to delete.")
        return False
    logger.info(f"Deleted resource {resource_id!r} from {collection!r}.")
    return True


def _expect_entity(response: CallResponse, method: str, url: str) -> ResourceEntity:
    # only GET and DELETE can live with an absent resource, for writes it means the target (or its parent) is gone
    if response.is_not_found:
        raise APIError(f"The call {method} {url} has failed with the code of {HTTP_NOT_FOUND}", HTTP_NOT_FOUND)
    if response.body is None:
        raise DecodeError(f"The call {method} {url} returned no entity in its response.", response.status_code)
    return response.body
