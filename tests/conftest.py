import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings

from core.config import AppConfig
from core.models import Environment


@pytest.fixture
def app_config():
    """AppConfig backed by a scratch QSettings store, cleared for every test."""
    settings = QSettings("RouteFlux", "TestConfig")
    settings.clear()

    config = AppConfig()
    config.settings = settings
    yield config
    settings.clear()


@pytest.fixture
def nested_environment():
    """
    root
    ├── f1 "Users"
    │   ├── r1  GET  users
    │   └── f2 "Admin"
    │       └── r3  crud admin/users
    └── r2  POST login
    """
    return Environment.model_validate({
        "uuid": "env-1",
        "name": "Demo API",
        "port": 3001,
        "endpointPrefix": "api",
        "folders": [
            {"uuid": "f1", "name": "Users", "children": [
                {"uuid": "r1", "type": "route"},
                {"uuid": "f2", "type": "folder"},
            ]},
            {"uuid": "f2", "name": "Admin", "children": [
                {"uuid": "r3", "type": "route"},
            ]},
        ],
        "routes": [
            {"uuid": "r1", "type": "http", "method": "get", "endpoint": "users",
             "documentation": "List all users"},
            {"uuid": "r2", "type": "http", "method": "post", "endpoint": "login",
             "documentation": "Authenticate"},
            {"uuid": "r3", "type": "crud", "method": "", "endpoint": "admin/users",
             "documentation": "Admin users resource"},
        ],
        "rootChildren": [
            {"uuid": "f1", "type": "folder"},
            {"uuid": "r2", "type": "route"},
        ],
    })


def pytest_configure(config):
    config.addinivalue_line("markers", "level2: intensive tests, need --level2 to run")

def pytest_addoption(parser):
    parser.addoption(
        "--level2", action="store_true", default=False, help="run level 2 intensive tests"
    )

def pytest_collection_modifyitems(config, items):
    if config.getoption("--level2"):
        # --level2 given in cli: do not skip
        return
    skip_level2 = pytest.mark.skip(reason="need --level2 option to run")
    for item in items:
        if "level2" in item.keywords:
            item.add_marker(skip_level2)
