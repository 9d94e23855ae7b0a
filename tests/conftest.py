import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Select the configuration environment so settings and logging pick up the
    test profile (quiet logs, no production-only behavior).
    """
    os.environ["CARTFLOW_ENV"] = session.config.option.env

    from shared.logging import configure_logging

    configure_logging()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Reset process-wide settings and collaborator factories after every test."""
    yield

    from ordering.coupons import reset_coupon_resolver
    from ordering.store import reset_order_store
    from payments.redirect import reset_redirector
    from shared.config import get_settings

    reset_coupon_resolver()
    reset_order_store()
    reset_redirector()
    get_settings.cache_clear()
