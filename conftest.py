import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--runlarge",
        action="store_true",
        default=False,
        help="run exhaustive sweeps over whole value widths, these are not run by default",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "large: exhaustive sweep, only run with --runlarge"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runlarge"):
        return
    skip_large = pytest.mark.skip(reason="need --runlarge option to run")
    for item in items:
        if "large" in item.keywords:
            item.add_marker(skip_large)
