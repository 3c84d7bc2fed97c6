#===========================================================================
#
# Tests for: nest_mqtt/log.py
#
#===========================================================================
import logging
import logging.handlers
import pytest
import nest_mqtt as IM


@pytest.fixture
def logger():
    obj = IM.log.get_logger()
    save = (obj.level, list(obj.handlers))
    yield obj

    obj.setLevel(save[0])
    for handler in list(obj.handlers):
        obj.removeHandler(handler)
    for handler in save[1]:
        obj.addHandler(handler)


#===========================================================================
def test_names():
    assert IM.log.get_logger().name == "nest_mqtt"
    assert IM.log.get_logger("nest_mqtt.mqtt").name == "nest_mqtt.mqtt"
    assert IM.log.get_logger("other").name == "nest_mqtt.other"


#===========================================================================
def test_initialize(logger, tmpdir):
    path = str(tmpdir.join("log.txt"))
    IM.log.initialize(level=logging.DEBUG, screen=True, file=path)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert isinstance(logger.handlers[1],
                      logging.handlers.WatchedFileHandler)

    # Calling again replaces the handlers.
    IM.log.initialize(level=logging.ERROR, screen=False)
    assert logger.level == logging.ERROR
    assert logger.handlers == []


#===========================================================================
def test_config(logger):
    config = {"logging" : {"level" : 30, "screen" : False}}
    IM.log.initialize(config=config)
    assert logger.level == 30
    assert logger.handlers == []

    # Direct inputs win over the config.
    IM.log.initialize(level=10, screen=True, config=config)
    assert logger.level == 10
    assert len(logger.handlers) == 1

#===========================================================================
