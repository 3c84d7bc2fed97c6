#===========================================================================
#
# Tests for: nest_mqtt/nest/SmokeDetector.py
#
#===========================================================================
import copy
import datetime
import pytest
import nest_mqtt as IM
import helpers as H

SmokeDetector = IM.nest.SmokeDetector
UTC = datetime.timezone.utc


#===========================================================================
class Test_SmokeDetector:
    #-----------------------------------------------------------------------
    def test_from_json(self):
        obj = SmokeDetector.from_json(H.main.FULL_JSON)

        assert obj.device_id == "RTMTKxsQTCxzVcsySOHPxKoF4OyCifrs"
        assert obj.name == "Hallway (A1B2)"
        assert obj.name_long == "Hallway Nest Protect (A1B2)"
        assert obj.co_alarm_state == IM.nest.AlarmState.OK
        assert obj.smoke_alarm_state == IM.nest.AlarmState.WARNING
        assert obj.battery_health == IM.nest.BatteryHealth.REPLACE
        assert obj.is_manual_test_active is False
        assert obj.ui_color_state == IM.nest.UiColorState.YELLOW
        assert obj.software_version == "3.1rc9"
        assert obj.is_online is True
        assert obj.last_connection == datetime.datetime(
            2016, 10, 31, 23, 59, 59, tzinfo=UTC)
        assert obj.last_manual_test_time == datetime.datetime(
            2016, 10, 31, 23, 59, 59, 338000, tzinfo=UTC)

        # Same data as the helper built by hand except for the ids.
        right = H.main.full_snapshot(structure_id=obj.structure_id,
                                     where_id=obj.where_id)
        assert obj == right

    #-----------------------------------------------------------------------
    def test_empty(self):
        obj = SmokeDetector.from_json({})
        for field in IM.nest.SmokeDetector._fields:
            assert getattr(obj, field) is None

        assert obj == SmokeDetector()

    #-----------------------------------------------------------------------
    def test_nulls(self):
        data = {"device_id" : "abc", "is_online" : None,
                "battery_health" : None, "last_connection" : None}
        obj = SmokeDetector.from_json(data)
        assert obj.device_id == "abc"
        assert obj.is_online is None
        assert obj.battery_health is None
        assert obj.last_connection is None

    #-----------------------------------------------------------------------
    def test_case(self):
        obj = SmokeDetector.from_json({"co_alarm_state" : "EMERGENCY",
                                       "ui_color_state" : "Red"})
        assert obj.co_alarm_state == IM.nest.AlarmState.EMERGENCY
        assert obj.ui_color_state == IM.nest.UiColorState.RED

    #-----------------------------------------------------------------------
    def test_naive_time(self):
        obj = SmokeDetector.from_json({"last_connection" :
                                       "2020-01-02T03:04:05"})
        assert obj.last_connection == datetime.datetime(2020, 1, 2, 3, 4, 5,
                                                        tzinfo=UTC)

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("key,value", [
        ("co_alarm_state", "bad"),
        ("smoke_alarm_state", 5),
        ("battery_health", "low"),
        ("ui_color_state", "blue"),
        ("is_online", "true"),
        ("is_manual_test_active", 1),
        ("last_connection", "yesterday"),
        ("last_manual_test_time", "2016-13-45T00:00:00Z"),
    ])
    def test_errors(self, key, value):
        data = copy.deepcopy(H.main.FULL_JSON)
        data[key] = value
        with pytest.raises(IM.NestDataError):
            SmokeDetector.from_json(data)

    #-----------------------------------------------------------------------
    def test_not_dict(self):
        with pytest.raises(IM.NestDataError):
            SmokeDetector.from_json(["a", "b"])

        # Data errors are package errors.
        assert issubclass(IM.NestDataError, IM.Error)

    #-----------------------------------------------------------------------
    def test_immutable(self):
        obj = H.main.full_snapshot()
        with pytest.raises(AttributeError):
            obj.is_online = False

        other = obj._replace(is_online=False)
        assert obj.is_online is True
        assert other.is_online is False
        assert obj != other

    #-----------------------------------------------------------------------
    def test_str(self):
        obj = SmokeDetector(device_id="abc", name="Hall")
        assert str(obj) == "SmokeDetector abc (Hall)"

#===========================================================================
