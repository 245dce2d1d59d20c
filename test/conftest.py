# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from nififlow.core.client import NiFiClient
from nififlow.core.configuration import Configuration

TEST_HOST = "nifi.example.com:8080"
TEST_API_PATH = "nifi-api"
BASE_URL = f"http://{TEST_HOST}/{TEST_API_PATH}"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def config():
    return Configuration(TEST_HOST, TEST_API_PATH)


@pytest.fixture
def client(config):
    return NiFiClient(config)
