# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum, unique
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from nififlow.core.entity import CoreData
from nififlow.core.resources.common import Position, ResourceEntity, Revision, component_id_dict
from nififlow.core.resources.operations import create_resource, delete_resource, get_resource, update_resource
from nififlow.core.serialization import as_object, get_field, get_list_field, get_object_field, load_str

if TYPE_CHECKING:
    from nififlow.core.client import NiFiClient

CONNECTIONS_COLLECTION = "connections"


@unique
class ConnectableType(str, Enum):
    PROCESSOR = "PROCESSOR"
    INPUT_PORT = "INPUT_PORT"
    OUTPUT_PORT = "OUTPUT_PORT"
    FUNNEL = "FUNNEL"
    REMOTE_INPUT_PORT = "REMOTE_INPUT_PORT"
    REMOTE_OUTPUT_PORT = "REMOTE_OUTPUT_PORT"


class ConnectionHand(CoreData):
    """One end of a connection. Neither the type nor the id is checked against the flow, both go to the server as is."""

    def __init__(self, type: str = "", id: str = "") -> None:
        self.type = type.value if isinstance(type, ConnectableType) else type
        self.id = id

    def to_json_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "id": self.id}

    @classmethod
    def from_json_dict(cls, data: Any) -> "ConnectionHand":
        data = as_object(data, "connection hand")
        return cls(get_field(data, "type", str, ""), get_field(data, "id", str, ""))


class ConnectionComponent(CoreData):
    def __init__(
        self,
        id: str = "",
        parent_group_id: str = "",
        source: Optional[ConnectionHand] = None,
        destination: Optional[ConnectionHand] = None,
        selected_relationships: Optional[List[str]] = None,
        bends: Optional[List[Position]] = None,
    ) -> None:
        self.id = id
        self.parent_group_id = parent_group_id
        self.source = source if source is not None else ConnectionHand()
        self.destination = destination if destination is not None else ConnectionHand()
        self.selected_relationships = selected_relationships if selected_relationships is not None else []
        self.bends = bends if bends is not None else []

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            **component_id_dict(self.id),
            "parentGroupId": self.parent_group_id,
            "source": self.source.to_json_dict(),
            "destination": self.destination.to_json_dict(),
            "selectedRelationships": list(self.selected_relationships),
            "bends": [bend.to_json_dict() for bend in self.bends],
        }

    @classmethod
    def from_json_dict(cls, data: Any) -> "ConnectionComponent":
        data = as_object(data, "component")
        return cls(
            id=get_field(data, "id", str, ""),
            parent_group_id=get_field(data, "parentGroupId", str, ""),
            source=get_object_field(data, "source", ConnectionHand.from_json_dict, ConnectionHand),
            destination=get_object_field(data, "destination", ConnectionHand.from_json_dict, ConnectionHand),
            selected_relationships=get_list_field(data, "selectedRelationships", load_str),
            bends=get_list_field(data, "bends", Position.from_json_dict),
        )


class Connection(ResourceEntity):
    COMPONENT_TYPE = ConnectionComponent

    def __init__(self, component: ConnectionComponent, revision: Optional[Revision] = None) -> None:
        super().__init__(component, revision)

    @classmethod
    def new(
        cls,
        parent_group_id: str,
        source: ConnectionHand,
        destination: ConnectionHand,
        selected_relationships: Optional[List[str]] = None,
        bends: Optional[List[Position]] = None,
    ) -> "Connection":
        return cls(
            ConnectionComponent(
                parent_group_id=parent_group_id,
                source=source,
                destination=destination,
                selected_relationships=selected_relationships,
                bends=bends,
            )
        )


def create_connection(client: "NiFiClient", connection: Connection) -> Connection:
    return create_resource(client, CONNECTIONS_COLLECTION, connection)


def get_connection(client: "NiFiClient", connection_id: str) -> Optional[Connection]:
    return get_resource(client, CONNECTIONS_COLLECTION, Connection, connection_id)


def update_connection(client: "NiFiClient", connection: Connection) -> Connection:
    return update_resource(client, CONNECTIONS_COLLECTION, connection)


def delete_connection(client: "NiFiClient", connection_id: str, version: Optional[int] = None) -> bool:
    return delete_resource(client, CONNECTIONS_COLLECTION, connection_id, version)
