# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import TYPE_CHECKING, Any, Dict, Optional

from nififlow.core.entity import CoreData
from nififlow.core.resources.common import Position, ResourceEntity, Revision, component_id_dict
from nififlow.core.resources.operations import (
    PROCESS_GROUPS_COLLECTION,
    create_resource,
    delete_resource,
    get_resource,
    update_resource,
)
from nififlow.core.serialization import as_object, get_field, get_object_field

if TYPE_CHECKING:
    from nififlow.core.client import NiFiClient


class ProcessGroupComponent(CoreData):
    def __init__(self, id: str = "", parent_group_id: str = "", name: str = "", position: Optional[Position] = None) -> None:
        self.id = id
        self.parent_group_id = parent_group_id
        self.name = name
        self.position = position if position is not None else Position()

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            **component_id_dict(self.id),
            "parentGroupId": self.parent_group_id,
            "name": self.name,
            "position": self.position.to_json_dict(),
        }

    @classmethod
    def from_json_dict(cls, data: Any) -> "ProcessGroupComponent":
        data = as_object(data, "component")
        return cls(
            id=get_field(data, "id", str, ""),
            parent_group_id=get_field(data, "parentGroupId", str, ""),
            name=get_field(data, "name", str, ""),
            position=get_object_field(data, "position", Position.from_json_dict, Position),
        )


class ProcessGroup(ResourceEntity):
    """A container node of the flow. Every group except the root one has exactly one parent group."""

    COMPONENT_TYPE = ProcessGroupComponent

    def __init__(self, component: ProcessGroupComponent, revision: Optional[Revision] = None) -> None:
        super().__init__(component, revision)

    @classmethod
    def new(cls, parent_group_id: str, name: str, position: Optional[Position] = None) -> "ProcessGroup":
        return cls(ProcessGroupComponent(parent_group_id=parent_group_id, name=name, position=position))


def create_process_group(client: "NiFiClient", process_group: ProcessGroup) -> ProcessGroup:
    return create_resource(client, PROCESS_GROUPS_COLLECTION, process_group)


def get_process_group(client: "NiFiClient", process_group_id: str) -> Optional[ProcessGroup]:
    return get_resource(client, PROCESS_GROUPS_COLLECTION, ProcessGroup, process_group_id)


def update_process_group(client: "NiFiClient", process_group: ProcessGroup) -> ProcessGroup:
    return update_resource(client, PROCESS_GROUPS_COLLECTION, process_group)


def delete_process_group(client: "NiFiClient", process_group_id: str, version: Optional[int] = None) -> bool:
    # children are removed (or refused) by the server, there is no cascade on this side
    return delete_resource(client, PROCESS_GROUPS_COLLECTION, process_group_id, version)
