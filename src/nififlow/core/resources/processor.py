# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from enum import Enum, unique
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from nififlow.core.call import HTTP_NOT_FOUND, CallResponseType
from nififlow.core.entity import CoreData
from nififlow.core.errors import APIError, DecodeError
from nififlow.core.resources.common import Position, ResourceEntity, Revision, RevisionEnvelope, component_id_dict
from nififlow.core.resources.operations import create_resource, delete_resource, get_resource, update_resource
from nififlow.core.serialization import as_object, get_field, get_list_field, get_object_field, load_str

if TYPE_CHECKING:
    from nififlow.core.client import NiFiClient

logger = logging.getLogger(__name__)

PROCESSORS_COLLECTION = "processors"


@unique
class ProcessorState(str, Enum):
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    DISABLED = "DISABLED"


class ProcessorRelationship(CoreData):
    def __init__(self, name: str = "", auto_terminate: bool = False) -> None:
        self.name = name
        self.auto_terminate = auto_terminate

    def to_json_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "autoTerminate": self.auto_terminate}

    @classmethod
    def from_json_dict(cls, data: Any) -> "ProcessorRelationship":
        data = as_object(data, "relationship")
        return cls(get_field(data, "name", str, ""), get_field(data, "autoTerminate", bool, False))


class ProcessorConfig(CoreData):
    def __init__(
        self,
        scheduling_strategy: str = "",
        scheduling_period: str = "",
        concurrently_schedulable_task_count: int = 0,
        # property values might be None on the server side (unset, inherits default)
        properties: Optional[Dict[str, Any]] = None,
        auto_terminated_relationships: Optional[List[str]] = None,
    ) -> None:
        self.scheduling_strategy = scheduling_strategy
        self.scheduling_period = scheduling_period
        self.concurrently_schedulable_task_count = concurrently_schedulable_task_count
        self.properties = properties if properties is not None else dict()
        self.auto_terminated_relationships = auto_terminated_relationships if auto_terminated_relationships is not None else []

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "schedulingStrategy": self.scheduling_strategy,
            "schedulingPeriod": self.scheduling_period,
            "concurrentlySchedulableTaskCount": self.concurrently_schedulable_task_count,
            "properties": dict(self.properties),
            "autoTerminatedRelationships": list(self.auto_terminated_relationships),
        }

    @classmethod
    def from_json_dict(cls, data: Any) -> "ProcessorConfig":
        data = as_object(data, "config")
        return cls(
            scheduling_strategy=get_field(data, "schedulingStrategy", str, ""),
            scheduling_period=get_field(data, "schedulingPeriod", str, ""),
            concurrently_schedulable_task_count=get_field(data, "concurrentlySchedulableTaskCount", int, 0),
            properties=dict(get_field(data, "properties", dict, dict())),
            auto_terminated_relationships=get_list_field(data, "autoTerminatedRelationships", load_str),
        )


class ProcessorComponent(CoreData):
    def __init__(
        self,
        id: str = "",
        parent_group_id: str = "",
        name: str = "",
        type: str = "",
        position: Optional[Position] = None,
        state: str = "",
        config: Optional[ProcessorConfig] = None,
        relationships: Optional[List[ProcessorRelationship]] = None,
    ) -> None:
        self.id = id
        self.parent_group_id = parent_group_id
        self.name = name
        # fully qualified processor class on the server side (e.g 'org.apache.nifi.processors.standard.LogAttribute')
        self.type = type
        self.position = position if position is not None else Position()
        self.state = state
        self.config = config if config is not None else ProcessorConfig()
        self.relationships = relationships if relationships is not None else []

    def to_json_dict(self) -> Dict[str, Any]:
        data = {
            **component_id_dict(self.id),
            "parentGroupId": self.parent_group_id,
            "name": self.name,
            "type": self.type,
            "position": self.position.to_json_dict(),
        }
        if self.state:
            data["state"] = self.state
        data["config"] = self.config.to_json_dict()
        data["relationships"] = [relationship.to_json_dict() for relationship in self.relationships]
        return data

    @classmethod
    def from_json_dict(cls, data: Any) -> "ProcessorComponent":
        data = as_object(data, "component")
        return cls(
            id=get_field(data, "id", str, ""),
            parent_group_id=get_field(data, "parentGroupId", str, ""),
            name=get_field(data, "name", str, ""),
            type=get_field(data, "type", str, ""),
            position=get_object_field(data, "position", Position.from_json_dict, Position),
            state=get_field(data, "state", str, ""),
            config=get_object_field(data, "config", ProcessorConfig.from_json_dict, ProcessorConfig),
            relationships=get_list_field(data, "relationships", ProcessorRelationship.from_json_dict),
        )


class Processor(ResourceEntity):
    COMPONENT_TYPE = ProcessorComponent

    def __init__(self, component: ProcessorComponent, revision: Optional[Revision] = None) -> None:
        super().__init__(component, revision)

    @classmethod
    def new(
        cls,
        parent_group_id: str,
        name: str,
        type: str,
        config: Optional[ProcessorConfig] = None,
        position: Optional[Position] = None,
    ) -> "Processor":
        return cls(ProcessorComponent(parent_group_id=parent_group_id, name=name, type=type, position=position, config=config))

    @property
    def state(self) -> str:
        return self.component.state

    def with_state(self, state: str, revision: Optional[Revision] = None) -> "Processor":
        """Copy with the new run-state (and the revision, when given), everything else stays as is."""
        return self.replace(
            component=self.component.replace(state=state),
            revision=revision if revision is not None else self.revision,
        )


def normalize_properties(properties: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop properties with null values, the server reports unset properties (which inherit defaults) that way."""
    return {name: value for name, value in (properties or dict()).items() if value is not None}


def auto_terminated_relationships(relationships: List[ProcessorRelationship]) -> List[str]:
    return [relationship.name for relationship in relationships if relationship.auto_terminate]


def reconcile_processor(processor: Processor, project_relationships: bool = False) -> Processor:
    """Align a processor received from the server with what callers are allowed to observe.

    Every processor handed back to callers goes through here, so that null-valued properties never leak out. When
    'project_relationships' is set, the auto-terminated relationship names are re-derived from 'relationships'.
    """
    config = processor.component.config
    changes = {"properties": normalize_properties(config.properties)}
    if project_relationships:
        changes["auto_terminated_relationships"] = auto_terminated_relationships(processor.component.relationships)
    return processor.replace(component=processor.component.replace(config=config.replace(**changes)))


def create_processor(client: "NiFiClient", processor: Processor) -> Processor:
    return reconcile_processor(create_resource(client, PROCESSORS_COLLECTION, processor))


def get_processor(client: "NiFiClient", processor_id: str) -> Optional[Processor]:
    processor = get_resource(client, PROCESSORS_COLLECTION, Processor, processor_id)
    if processor is None:
        return None
    return reconcile_processor(processor, project_relationships=True)


def update_processor(client: "NiFiClient", processor: Processor) -> Processor:
    return reconcile_processor(update_resource(client, PROCESSORS_COLLECTION, processor))


def delete_processor(client: "NiFiClient", processor_id: str, version: Optional[int] = None) -> bool:
    return delete_resource(client, PROCESSORS_COLLECTION, processor_id, version)


def set_processor_state(client: "NiFiClient", processor: Processor, state: Union[ProcessorState, str]) -> Processor:
    """Request a run-state change for the processor.

    Only the id, the last known revision and the target state are sent, so that the rest of the configuration (which
    might have been changed concurrently by someone else) is not overwritten. The change is applied asynchronously by
    the server, this call does not wait for it to take effect.

    Returns a copy of 'processor' with the new state and the revision reported by the server. When the response
    carries no readable revision, the last known one is kept. On failure the error is raised and 'processor'
    remains as is.
    """
    state = state.value if isinstance(state, ProcessorState) else state
    state_update = {
        "revision": processor.revision.to_json_dict(),
        "component": {"id": processor.id, "state": state},
    }
    url = client.config.url(PROCESSORS_COLLECTION, processor.id)
    response = client.json_call("PUT", url, state_update, RevisionEnvelope)
    if response.response_type == CallResponseType.FAILED and isinstance(response.error, DecodeError):
        # the server has accepted the change, only its report of the new revision is unreadable
        logger.warning(
            f"Processor {processor.id!r} state change is accepted but the revision in the response is unusable, "
            f"keeping the last known revision. Error: {response.error}"
        )
        revision = None
    else:
        response.raise_for_failure()
        if response.is_not_found:
            raise APIError(f"The call PUT {url} has failed with the code of {HTTP_NOT_FOUND}", HTTP_NOT_FOUND)
        revision = response.body.revision if response.body is not None else None
    logger.info(f"Processor {processor.id!r} state is set to {state!r} (was {processor.state!r}).")
    return processor.with_state(state, revision)


def start_processor(client: "NiFiClient", processor: Processor) -> Processor:
    return set_processor_state(client, processor, ProcessorState.RUNNING)


def stop_processor(client: "NiFiClient", processor: Processor) -> Processor:
    return set_processor_state(client, processor, ProcessorState.STOPPED)
