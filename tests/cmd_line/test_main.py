#===========================================================================
#
# Tests for: nest_mqtt/cmd_line/main.py
#
#===========================================================================
import importlib
from unittest import mock
import pytest
import nest_mqtt as IM

# cmd_line exports the main function with the same name as the module.
Main = importlib.import_module("nest_mqtt.cmd_line.main")


#===========================================================================
class Test_main:
    #-----------------------------------------------------------------------
    def test_parse(self):
        args = Main.parse_args(["config.yaml", "start", "-l", "file.log",
                                "--level", "10"])
        assert args.config == "config.yaml"
        assert args.log == "file.log"
        assert args.level == 10
        assert args.log_screen is False
        assert args.func == IM.cmd_line.start.start

        with pytest.raises(SystemExit):
            Main.parse_args(["config.yaml"])

    #-----------------------------------------------------------------------
    def test_validate(self, config_path, capsys):
        path = config_path('basic.yaml')
        assert Main.main([path, "validate"]) == 0
        assert "is valid" in capsys.readouterr().out

        val = Main.main([config_path('bad_port.yaml'), "validate"])
        assert "Validation Error" in val

    #-----------------------------------------------------------------------
    def test_start(self, config_path, mock_paho_mqtt):
        with mock.patch.object(IM.log, "initialize") as log_init:
            with mock.patch.object(IM.network.Mqtt, "run") as run:
                Main.main([config_path('basic.yaml'), "start"])

        assert run.call_count == 1
        args, kwargs = log_init.call_args
        # No log file so the screen is forced on.
        assert args[1] is True

    #-----------------------------------------------------------------------
    def test_start_interrupt(self, config_path, mock_paho_mqtt):
        with mock.patch.object(IM.log, "initialize"):
            with mock.patch.object(IM.network.Mqtt, "run",
                                   side_effect=KeyboardInterrupt):
                with mock.patch.object(IM.mqtt.Mqtt, "close") as close:
                    Main.main([config_path('basic.yaml'), "start"])

        assert close.call_count == 1

#===========================================================================
