# Configuration for the tests.
# Use `py.test` to run the tests.

# (This file needs to be in or above the directory where py.test is called)

import pytest
import os

def pytest_addoption(parser):
    group = parser.getgroup("pokelegality")
    group.addoption("--data-dir", action="store", default=None,
        help="Directory of real extracted tables (if not specified and POKELEGALITY_DATA_DIR isn't set, tests that need them are skipped)")
    group.addoption("--all", action="store_true", default=False,
        help="Run all tests, even those that take a lot of time")

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: takes a while; only run with --all")

def pytest_runtest_setup(item):
    if 'slow' in item.keywords and not item.config.getvalue('all'):
        pytest.skip("skipping slow tests")

@pytest.fixture(scope="session")
def data_dir(request):
    data_dir = request.config.getvalue("data_dir")
    if not data_dir:
        data_dir = os.environ.get('POKELEGALITY_DATA_DIR')
    if not data_dir or not os.path.isdir(data_dir):
        raise pytest.skip("Extracted tables unavailable")
    return data_dir
