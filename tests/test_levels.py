from pyman.levels import LEVELS, level_data


def test_table_has_twenty_one_rows():
    assert len(LEVELS) == 21


def test_first_level():
    data = level_data(1)
    assert data.fruit == "cherry"
    assert data.fruit_points == 100
    assert data.elroy_thresholds() == (20, 10)
    assert data.fright_time == 6
    assert data.pen_dot_limits == {"pinky": 0, "inky": 30, "clyde": 60}


def test_level_numbers_are_clamped():
    assert level_data(0) is LEVELS[0]
    assert level_data(21) is LEVELS[-1]
    assert level_data(400) is LEVELS[-1]


def test_late_levels_have_no_fright():
    assert level_data(19).fright_time == 0
    assert level_data(19).fright_flashes == 0


def test_mode_times_start_with_scatter():
    for data in LEVELS:
        assert len(data.mode_times) == 7
        assert data.mode_times[0] in (5, 7)
