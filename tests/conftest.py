import os
from typing import Any

import pytest

from resource_binder.providers.base import ResourceData
from tests.fakes import WIDGET_SCHEMA, FakeProvider, FunctionResourceHandler


@pytest.fixture(autouse=True)
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def widget_handler():
    def read(data: ResourceData, meta: Any) -> None:
        data.set("name", "foo")

    return FunctionResourceHandler("example_widget", WIDGET_SCHEMA, read)


@pytest.fixture
def widget_provider(widget_handler):
    return FakeProvider([widget_handler])
