from helmdisplay.pvci import MAX_FIELDS, PvciStatus, parse_pvci, split_fields


def test_split_truncates_fields():
    assert split_fields("abcd,12,,x") == ["abc", "12", "", "x"]


def test_split_empty_line():
    assert split_fields("") == [""]


def test_split_caps_field_count():
    assert len(split_fields("a," * 60)) == MAX_FIELDS


def test_full_scale_positions():
    status = parse_pvci("$PV,999,0,999,0,999,0,0,0,0")
    assert status.port_bucket == 10
    assert status.stbd_bucket == -10
    assert status.port_nozzle == status.port_bucket
    assert status.stbd_nozzle == status.stbd_bucket
    assert status.port_interceptor == 20
    assert status.stbd_interceptor == 0


def test_positions_are_symmetric():
    status = parse_pvci("$PV,999,0")
    assert status.port_bucket == -status.stbd_bucket


def test_missing_fields_read_as_zero_raw():
    status = parse_pvci("$PV")
    assert status.port_bucket == parse_pvci("$PV,0").port_bucket
    assert status.sfe == 0 and status.nfe == 0 and status.sta1 == 0


def test_fault_bytes_and_alarm():
    status = parse_pvci("$PV,0,0,0,0,0,0,5,6,7")
    assert (status.sfe, status.nfe, status.sta1) == (5, 6, 7)
    assert status.has_alarm() is True


def test_fault_bytes_fit_in_a_byte():
    status = parse_pvci("$PV,0,0,0,0,0,0,999,999,999")
    assert all(0 <= value < 256 for value in (status.sfe, status.nfe, status.sta1))


def test_no_alarm_without_faults():
    status = parse_pvci("$PV,500,500,500,500,0,0,0,0,0")
    assert status.has_alarm() is False
    assert status.lcd_config == 3


def test_alarm_latches_across_lines():
    first = parse_pvci("$PV,0,0,0,0,0,0,1,0,0")
    second = parse_pvci("$PV,0,0,0,0,0,0,0,0,0", first)
    assert second.has_alarm() is True
    assert second.sfe == 0


def test_previous_station_bytes_carried_over():
    previous = PvciStatus(sta2=4, cfe=1)
    status = parse_pvci("$PV,0,0,0,0,0,0,0,0,0", previous)
    assert status.sta2 == 4
    assert status.cfe == 1
    assert status.has_alarm() is True