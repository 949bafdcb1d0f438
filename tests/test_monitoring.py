import json
import logging

import pytest

from transit_router.config import ObservabilityConfig
from transit_router.domain.errors import ConfigurationError
from transit_router.monitoring import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("transit_router")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def test_configure_logging_sets_level_and_single_handler():
    configure_logging(ObservabilityConfig(level="debug"))
    package_logger = configure_logging(ObservabilityConfig(level="WARNING"))

    assert package_logger.name == "transit_router"
    assert package_logger.level == logging.WARNING
    named = [h for h in package_logger.handlers if h.get_name() == "transit_router"]
    assert len(named) == 1


def test_unknown_level_is_rejected():
    with pytest.raises(ConfigurationError) as exc:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc.value.setting_name == "level"


def test_structured_logging_uses_json():
    package_logger = configure_logging(ObservabilityConfig(structured=True))
    handler = package_logger.handlers[-1]

    assert isinstance(handler.formatter, JsonFormatter)


def test_json_formatter_includes_extra_fields():
    record = logging.getLogger("transit_router.test").makeRecord(
        "transit_router.test",
        logging.INFO,
        __file__,
        1,
        "Route found",
        None,
        None,
        extra={"departure": "A", "stops": 3},
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Route found"
    assert payload["level"] == "INFO"
    assert payload["departure"] == "A"
    assert payload["stops"] == 3
    assert "lineno" not in payload
