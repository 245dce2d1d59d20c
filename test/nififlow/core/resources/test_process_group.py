# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json

import pytest
import requests
import responses

from nififlow.core.errors import APIError, DecodeError, TransportError
from nififlow.core.resources.common import Position, Revision
from nififlow.core.resources.process_group import (
    ProcessGroup,
    ProcessGroupComponent,
    create_process_group,
    delete_process_group,
    get_process_group,
    update_process_group,
)


def _process_group_json(id="pg1", parent_group_id="root", name="etl", version=1):
    return {
        "id": id,
        "uri": f"http://nifi.example.com:8080/nifi-api/process-groups/{id}",
        "revision": {"version": version},
        "component": {"id": id, "parentGroupId": parent_group_id, "name": name, "position": {"x": 10.0, "y": 20.0}, "comments": ""},
        "runningCount": 0,
    }


class TestProcessGroup:
    def test_process_group_should_serialize_without_empty_id(self):
        process_group = ProcessGroup.new("root", "etl", Position(1, 2))

        assert process_group.to_json_dict() == {
            "revision": {"version": 0},
            "component": {"parentGroupId": "root", "name": "etl", "position": {"x": 1, "y": 2}},
        }

    def test_process_group_should_load_from_server_entity(self):
        process_group = ProcessGroup.from_json_dict(_process_group_json())

        assert process_group.id == "pg1"
        assert process_group.parent_group_id == "root"
        assert process_group.version == 1
        assert process_group.component == ProcessGroupComponent("pg1", "root", "etl", Position(10.0, 20.0))

    @responses.mock.activate
    def test_create_process_group(self, client, base_url):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/root/process-groups", json=_process_group_json(), status=201)
        process_group = ProcessGroup.new("root", "etl")

        created = create_process_group(client, process_group)

        assert created.component.id == "pg1"
        assert created.revision.version == 1
        assert created.component.name == "etl"
        sent = json.loads(responses.mock.calls[0].request.body)
        assert sent == {"revision": {"version": 0}, "component": {"parentGroupId": "root", "name": "etl", "position": {"x": 0.0, "y": 0.0}}}
        # caller's value is left as is
        assert process_group.component.id == ""
        assert process_group.revision == Revision(0)

    @responses.mock.activate
    def test_create_process_group_should_always_post_revision_zero(self, client, base_url):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/root/process-groups", json=_process_group_json(), status=201)

        create_process_group(client, ProcessGroup.new("root", "etl").replace(revision=Revision(5)))

        assert json.loads(responses.mock.calls[0].request.body)["revision"] == {"version": 0}

    @pytest.mark.parametrize("status", [400, 409, 500])
    @responses.mock.activate
    def test_create_process_group_should_raise_on_error_status(self, client, base_url, status):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/root/process-groups", json={"message": "rejected"}, status=status)
        process_group = ProcessGroup.new("root", "etl")

        with pytest.raises(APIError) as error:
            create_process_group(client, process_group)
        assert error.value.status_code == status
        assert process_group.id == ""

    @responses.mock.activate
    def test_create_process_group_should_fail_when_parent_is_absent(self, client, base_url):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/ghost/process-groups", status=404)

        with pytest.raises(APIError) as error:
            create_process_group(client, ProcessGroup.new("ghost", "etl"))
        assert error.value.status_code == 404

    @responses.mock.activate
    def test_create_process_group_should_fail_on_empty_response(self, client, base_url):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/root/process-groups", status=201)

        with pytest.raises(DecodeError):
            create_process_group(client, ProcessGroup.new("root", "etl"))

    @responses.mock.activate
    def test_get_process_group(self, client, base_url):
        responses.mock.add(responses.mock.GET, f"{base_url}/process-groups/pg1", json=_process_group_json(version=4), status=200)

        process_group = get_process_group(client, "pg1")

        assert process_group.id == "pg1"
        assert process_group.version == 4

    @responses.mock.activate
    def test_get_process_group_should_return_none_when_absent(self, client, base_url):
        responses.mock.add(responses.mock.GET, f"{base_url}/process-groups/missing", status=404)

        assert get_process_group(client, "missing") is None

    @pytest.mark.parametrize("status", [400, 403, 500, 502])
    @responses.mock.activate
    def test_get_process_group_should_raise_on_error_status(self, client, base_url, status):
        responses.mock.add(responses.mock.GET, f"{base_url}/process-groups/pg1", json=_process_group_json(), status=status)

        with pytest.raises(APIError) as error:
            get_process_group(client, "pg1")
        assert error.value.status_code == status

    @responses.mock.activate
    def test_get_process_group_should_raise_on_transport_error(self, client, base_url):
        responses.mock.add(responses.mock.GET, f"{base_url}/process-groups/pg1", body=requests.ConnectionError())

        with pytest.raises(TransportError) as error:
            get_process_group(client, "pg1")
        assert error.value.status_code is None

    @responses.mock.activate
    def test_update_process_group(self, client, base_url):
        responses.mock.add(
            responses.mock.PUT, f"{base_url}/process-groups/pg1", json=_process_group_json(name="etl-renamed", version=5), status=200
        )
        process_group = ProcessGroup.from_json_dict(_process_group_json(version=4))
        renamed = process_group.replace(component=process_group.component.replace(name="etl-renamed"))

        updated = update_process_group(client, renamed)

        assert updated.version == 5
        assert updated.component.name == "etl-renamed"
        sent = json.loads(responses.mock.calls[0].request.body)
        assert sent["revision"] == {"version": 4}
        assert sent["component"]["id"] == "pg1"
        assert sent["component"]["name"] == "etl-renamed"
        assert renamed.version == 4

    @responses.mock.activate
    def test_update_process_group_should_surface_stale_revision(self, client, base_url):
        responses.mock.add(responses.mock.PUT, f"{base_url}/process-groups/pg1", body="stale revision", status=409)
        process_group = ProcessGroup.from_json_dict(_process_group_json(version=1))

        with pytest.raises(APIError) as error:
            update_process_group(client, process_group)
        assert error.value.status_code == 409

    @responses.mock.activate
    def test_delete_process_group(self, client, base_url):
        responses.mock.add(responses.mock.DELETE, f"{base_url}/process-groups/pg1", json=_process_group_json(), status=200)

        assert delete_process_group(client, "pg1", version=3)
        assert responses.mock.calls[0].request.url == f"{base_url}/process-groups/pg1?version=3"

    @responses.mock.activate
    def test_delete_process_group_should_be_idempotent(self, client, base_url):
        responses.mock.add(responses.mock.DELETE, f"{base_url}/process-groups/pg1", status=404)

        assert delete_process_group(client, "pg1") is False

    @responses.mock.activate
    def test_delete_process_group_should_raise_on_error_status(self, client, base_url):
        responses.mock.add(responses.mock.DELETE, f"{base_url}/process-groups/pg1", status=409)

        with pytest.raises(APIError) as error:
            delete_process_group(client, "pg1")
        assert error.value.status_code == 409
