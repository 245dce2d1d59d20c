# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json

import pytest
import responses

from nififlow.core.errors import APIError
from nififlow.core.resources.common import Position
from nififlow.core.resources.connection import (
    ConnectableType,
    Connection,
    ConnectionHand,
    create_connection,
    delete_connection,
    get_connection,
    update_connection,
)


def _connection_json(id="c1", version=1, selected_relationships=("success",), bends=()):
    return {
        "id": id,
        "revision": {"version": version},
        "component": {
            "id": id,
            "parentGroupId": "pg1",
            "source": {"type": "PROCESSOR", "id": "p1", "groupId": "pg1"},
            "destination": {"type": "PROCESSOR", "id": "p2", "groupId": "pg1"},
            "selectedRelationships": list(selected_relationships),
            "bends": [{"x": x, "y": y} for x, y in bends],
            "backPressureObjectThreshold": 10000,
        },
    }


class TestConnection:
    def test_connection_hand_should_accept_enum_and_plain_types(self):
        assert ConnectionHand(ConnectableType.PROCESSOR, "p1") == ConnectionHand("PROCESSOR", "p1")
        # unknown kinds are passed through
        assert ConnectionHand("SOMETHING_NEW", "x").to_json_dict() == {"type": "SOMETHING_NEW", "id": "x"}

    def test_connection_should_serialize(self):
        connection = Connection.new(
            "pg1",
            ConnectionHand(ConnectableType.PROCESSOR, "p1"),
            ConnectionHand(ConnectableType.FUNNEL, "f1"),
            ["success", "failure"],
            [Position(5, 6), Position(7, 8)],
        )

        assert connection.to_json_dict() == {
            "revision": {"version": 0},
            "component": {
                "parentGroupId": "pg1",
                "source": {"type": "PROCESSOR", "id": "p1"},
                "destination": {"type": "FUNNEL", "id": "f1"},
                "selectedRelationships": ["success", "failure"],
                "bends": [{"x": 5, "y": 6}, {"x": 7, "y": 8}],
            },
        }

    def test_connection_should_keep_bend_order(self):
        connection = Connection.from_json_dict(_connection_json(bends=[(3, 3), (1, 1), (2, 2)]))

        assert connection.component.bends == [Position(3.0, 3.0), Position(1.0, 1.0), Position(2.0, 2.0)]

    @responses.mock.activate
    def test_create_connection(self, client, base_url):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/pg1/connections", json=_connection_json(), status=201)
        # relationships are not checked against the source processor
        connection = Connection.new("pg1", ConnectionHand("PROCESSOR", "p1"), ConnectionHand("PROCESSOR", "p2"), ["no-such-relationship"])

        created = create_connection(client, connection)

        assert created.id == "c1"
        assert created.version == 1
        assert created.component.source == ConnectionHand("PROCESSOR", "p1")
        sent = json.loads(responses.mock.calls[0].request.body)
        assert sent["revision"] == {"version": 0}
        assert sent["component"]["selectedRelationships"] == ["no-such-relationship"]

    @pytest.mark.parametrize("status", [400, 409, 500])
    @responses.mock.activate
    def test_create_connection_should_raise_on_error_status(self, client, base_url, status):
        responses.mock.add(responses.mock.POST, f"{base_url}/process-groups/pg1/connections", json={"message": "rejected"}, status=status)

        with pytest.raises(APIError) as error:
            create_connection(client, Connection.new("pg1", ConnectionHand("PROCESSOR", "p1"), ConnectionHand("PROCESSOR", "p2"), ["success"]))
        assert error.value.status_code == status

    @responses.mock.activate
    def test_get_connection(self, client, base_url):
        responses.mock.add(responses.mock.GET, f"{base_url}/connections/c1", json=_connection_json(version=2), status=200)

        connection = get_connection(client, "c1")

        assert connection.version == 2
        assert connection.component.destination.id == "p2"
        assert connection.component.selected_relationships == ["success"]

    @responses.mock.activate
    def test_get_connection_should_return_none_when_absent(self, client, base_url):
        responses.mock.add(responses.mock.GET, f"{base_url}/connections/c1", status=404)

        assert get_connection(client, "c1") is None

    @responses.mock.activate
    def test_update_connection(self, client, base_url):
        responses.mock.add(
            responses.mock.PUT, f"{base_url}/connections/c1", json=_connection_json(version=3, selected_relationships=("failure",)), status=200
        )
        connection = Connection.from_json_dict(_connection_json(version=2))

        updated = update_connection(
            client, connection.replace(component=connection.component.replace(selected_relationships=["failure"]))
        )

        assert updated.version == 3
        assert updated.component.selected_relationships == ["failure"]
        sent = json.loads(responses.mock.calls[0].request.body)
        assert sent["revision"] == {"version": 2}
        assert sent["component"]["id"] == "c1"

    @responses.mock.activate
    def test_update_connection_should_raise_on_error_status(self, client, base_url):
        responses.mock.add(responses.mock.PUT, f"{base_url}/connections/c1", status=400)

        with pytest.raises(APIError) as error:
            update_connection(client, Connection.from_json_dict(_connection_json()))
        assert error.value.status_code == 400

    @responses.mock.activate
    def test_delete_connection(self, client, base_url):
        responses.mock.add(responses.mock.DELETE, f"{base_url}/connections/c1", status=200)

        assert delete_connection(client, "c1", 1)
        assert responses.mock.calls[0].request.url.endswith("/connections/c1?version=1")

    @responses.mock.activate
    def test_delete_connection_should_raise_on_server_error(self, client, base_url):
        responses.mock.add(responses.mock.DELETE, f"{base_url}/connections/c1", status=500)

        with pytest.raises(APIError):
            delete_connection(client, "c1")
