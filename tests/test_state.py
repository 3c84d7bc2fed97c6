#===========================================================================
#
# Tests for: nest_mqtt/state.py
#
#===========================================================================
import datetime
import nest_mqtt as IM

St = IM.state


#===========================================================================
def test_undef():
    assert St.UNDEF is St.UnDef.UNDEF
    assert St.UNDEF is not None
    assert str(St.UNDEF) == "UNDEF"


#===========================================================================
def test_on_off():
    assert St.OnOff.from_bool(True) == St.OnOff.ON
    assert St.OnOff.from_bool(False) == St.OnOff.OFF
    assert str(St.OnOff.ON) == "ON"


#===========================================================================
def test_status():
    assert St.ThingStatus.from_online(None) == St.ThingStatus.UNKNOWN
    assert St.ThingStatus.from_online(True) == St.ThingStatus.ONLINE
    assert St.ThingStatus.from_online(False) == St.ThingStatus.OFFLINE
    assert str(St.ThingStatus.OFFLINE) == "offline"


#===========================================================================
def test_converters():
    assert St.as_string_or_undef(None) == St.UNDEF
    assert St.as_string_or_undef("abc") == "abc"
    assert St.as_string_or_undef(IM.nest.AlarmState.EMERGENCY) == \
        "emergency"

    stamp = datetime.datetime(2020, 5, 6, 7, 8, 9,
                              tzinfo=datetime.timezone.utc)
    assert St.as_datetime_or_undef(None) == St.UNDEF
    assert St.as_datetime_or_undef(stamp) == stamp

    assert St.as_on_off_or_undef(None) == St.UNDEF
    assert St.as_on_off_or_undef(True) == St.OnOff.ON
    assert St.as_on_off_or_undef(False) == St.OnOff.OFF


#===========================================================================
def test_to_str():
    stamp = datetime.datetime(2020, 5, 6, 7, 8, 9,
                              tzinfo=datetime.timezone.utc)
    assert St.to_str(St.UNDEF) == "UNDEF"
    assert St.to_str(St.OnOff.OFF) == "OFF"
    assert St.to_str(stamp) == "2020-05-06T07:08:09+00:00"
    assert St.to_str("warning") == "warning"
    assert St.to_str(St.ThingStatus.ONLINE) == "online"
    assert St.to_str(St.REFRESH) == "REFRESH"


#===========================================================================
def test_channel_find():
    assert IM.Channel.find("low_battery") == IM.Channel.LOW_BATTERY
    assert IM.Channel.find(" CO_ALARM_STATE ") == IM.Channel.CO_ALARM_STATE
    assert IM.Channel.find(IM.Channel.UI_COLOR_STATE) == \
        IM.Channel.UI_COLOR_STATE
    assert IM.Channel.find("foo") is None
    assert IM.Channel.find(None) is None
    assert len(IM.Channel) == 7
    assert str(IM.Channel.LAST_CONNECTION) == "last_connection"

#===========================================================================
