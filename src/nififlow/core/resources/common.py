# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

from nififlow.core.entity import CoreData
from nififlow.core.serialization import as_object, get_field, get_object_field

_ResourceEntityType = TypeVar("_ResourceEntityType", bound="ResourceEntity")


class Revision(CoreData):
    """Optimistic-concurrency token of a resource. Only the server advances it, the client forwards what it was given."""

    def __init__(self, version: int = 0) -> None:
        self.version = version

    def to_json_dict(self) -> Dict[str, Any]:
        return {"version": self.version}

    @classmethod
    def from_json_dict(cls, data: Any) -> "Revision":
        data = as_object(data, "revision")
        return cls(get_field(data, "version", int, 0))


class Position(CoreData):
    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y

    def to_json_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json_dict(cls, data: Any) -> "Position":
        data = as_object(data, "position")
        return cls(get_field(data, "x", float, 0.0), get_field(data, "y", float, 0.0))


class RevisionEnvelope(CoreData):
    """Minimal view over an entity response, used when only the revision reported by the server matters."""

    def __init__(self, revision: Optional[Revision] = None) -> None:
        self.revision = revision

    @classmethod
    def from_json_dict(cls, data: Any) -> "RevisionEnvelope":
        data = as_object(data, "entity")
        return cls(get_object_field(data, "revision", Revision.from_json_dict, lambda: None))


class ResourceEntity(CoreData):
    """Wire envelope shared by all resource kinds: {"revision": {...}, "component": {...}}.

    Subclasses bind COMPONENT_TYPE to the component class of their kind.
    """

    COMPONENT_TYPE: ClassVar[Type[CoreData]] = None

    def __init__(self, component: CoreData, revision: Optional[Revision] = None) -> None:
        self.revision = revision if revision is not None else Revision()
        self.component = component

    @property
    def id(self) -> str:
        return self.component.id

    @property
    def parent_group_id(self) -> str:
        return self.component.parent_group_id

    @property
    def version(self) -> int:
        return self.revision.version

    def to_json_dict(self) -> Dict[str, Any]:
        return {"revision": self.revision.to_json_dict(), "component": self.component.to_json_dict()}

    @classmethod
    def from_json_dict(cls: Type[_ResourceEntityType], data: Any) -> _ResourceEntityType:
        data = as_object(data, cls.__name__)
        revision = get_object_field(data, "revision", Revision.from_json_dict, Revision)
        component = get_object_field(data, "component", cls.COMPONENT_TYPE.from_json_dict, cls.COMPONENT_TYPE)
        return cls(component, revision)

    def for_creation(self: _ResourceEntityType) -> _ResourceEntityType:
        """Copy to be POSTed: ids and revisions are assigned by the server, so start from version 0."""
        return self.replace(revision=Revision(0))


def component_id_dict(component_id: str) -> Dict[str, Any]:
    # 'id' is omitted until the server assigns one
    return {"id": component_id} if component_id else {}
