"""Shared fixtures: a fake ProcessService and a log in tmp_path."""

import pytest

from process_booster.activity_log import ActivityLog
from process_booster.server import create_app

from tests.fakes import FakeProcessService


@pytest.fixture
def activity_log(tmp_path):
    return ActivityLog(tmp_path / "boost_log.txt")


@pytest.fixture
def service():
    return FakeProcessService()


@pytest.fixture
def client(service, activity_log):
    app = create_app(service, activity_log, index_html="<html>hi</html>")
    app.testing = True
    return app.test_client()
