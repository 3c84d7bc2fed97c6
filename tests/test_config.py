#===========================================================================
#
# Tests for: nest_mqtt/config.py
#
#===========================================================================
import pytest
import yaml
import nest_mqtt as IM
import helpers as H


class Test_config:
    #-----------------------------------------------------------------------
    def test_find(self):
        (cls, args) = IM.config.find("smoke_detectors")
        assert cls == IM.mqtt.SmokeDetector
        assert args == {}

        (cls, args) = IM.config.find("SMOKE_DETECTORS")
        assert cls == IM.mqtt.SmokeDetector

    #-----------------------------------------------------------------------
    def test_errors(self):
        with pytest.raises(Exception):
            IM.config.find("thermostats")

    #-----------------------------------------------------------------------
    def test_load(self, config_path):
        cfg = IM.config.load(config_path('basic.yaml'))
        assert "logging" in cfg
        assert "mqtt" in cfg
        assert "nest" in cfg
        assert len(cfg["nest"]["smoke_detectors"]) == 2

    #-----------------------------------------------------------------------
    def test_apply(self, config_path):
        cfg = IM.config.load(config_path('basic.yaml'))

        link = H.network.MockMqtt()
        mqtt = IM.mqtt.Mqtt(link)
        IM.config.apply(cfg, mqtt)

        assert link.config == cfg["mqtt"]
        assert sorted(mqtt.devices.keys()) == ["dev1", "dev2"]

        dev1 = mqtt.find("dev1")
        assert dev1.name == "Hallway"
        assert dev1.channels == set(IM.Channel)
        assert dev1.status == IM.state.ThingStatus.UNKNOWN

        dev2 = mqtt.find("dev2")
        assert dev2.name is None
        assert dev2.channels == {IM.Channel.CO_ALARM_STATE,
                                 IM.Channel.LOW_BATTERY}

    #-----------------------------------------------------------------------
    def test_apply_no_devices(self):
        link = H.network.MockMqtt()
        mqtt = IM.mqtt.Mqtt(link)
        IM.config.apply({"mqtt" : {"broker" : "a", "port" : 1},
                         "nest" : {"smoke_detectors" : None}}, mqtt)
        assert mqtt.devices == {}

        IM.config.apply({"mqtt" : {"broker" : "a", "port" : 1}}, mqtt)
        assert mqtt.devices == {}

    #-----------------------------------------------------------------------
    def test_multi(self, config_path):
        cfg = IM.config.load(config_path('multi.yaml'))
        assert cfg["mqtt"] == {"broker" : "127.0.0.1", "port" : 1883}
        ids = [i["id"] for i in cfg["nest"]["smoke_detectors"]]
        assert ids == ["dev1", "dev2"]

        assert IM.config.validate(config_path('multi.yaml')) == ""

    #-----------------------------------------------------------------------
    def test_multi_error(self, config_path):
        with pytest.raises(Exception):
            IM.config.load(config_path('multi_error.yaml'))

    #-----------------------------------------------------------------------
    def test_include_not_global(self):
        # The include tag is only registered on our loader.
        with pytest.raises(yaml.YAMLError):
            yaml.safe_load("a: !include foo.yaml")

    #-----------------------------------------------------------------------
    def test_validate_good(self, config_path):
        assert IM.config.validate(config_path('basic.yaml')) == ""

    #-----------------------------------------------------------------------
    def test_validate_example(self, config_path):
        # The example config in the repository root must be valid.
        import os
        path = os.path.join(os.path.dirname(config_path('x')), '..', '..',
                            'config.yaml')
        assert IM.config.validate(path) == ""

    #-----------------------------------------------------------------------
    def test_validate_bad_port(self, config_path):
        val = IM.config.validate(config_path('bad_port.yaml'))
        assert "Validation Error" in val
        assert "The broker port must be between 1 and 65535." in val

    #-----------------------------------------------------------------------
    def test_validate_bad_channel(self, config_path):
        val = IM.config.validate(config_path('bad_channel.yaml'))
        assert "Unknown channel 'battery'" in val
        assert "Invalid template" in val

#===========================================================================
