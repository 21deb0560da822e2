from invaders.alien import (
    ALIEN_SIZE,
    NUMBER_OF_ALIENS_IN_ROW,
    PADDING,
    Alien,
    AlienType,
    alien_points,
    new_alien,
    spawn_alien_wave,
)


def test_points_per_type():
    assert alien_points(AlienType.SQUID) == 40
    assert alien_points(AlienType.ARM) == 20
    assert alien_points(AlienType.FOOT) == 10


def test_new_alien_defaults():
    alien = new_alien(AlienType.ARM)
    assert alien.points_value == alien_points(AlienType.ARM)
    assert alien.current_frame == 0
    assert (alien.x, alien.y) == (0, 0)


def test_toggle_frame_alternates():
    alien = Alien(AlienType.FOOT)
    alien.toggle_frame()
    assert alien.current_frame == 1
    alien.toggle_frame()
    assert alien.current_frame == 0


def test_alien_size():
    alien = new_alien(AlienType.SQUID)
    assert (alien.width, alien.height) == (ALIEN_SIZE, ALIEN_SIZE)


def test_wave_has_five_rows_per_column():
    wave = spawn_alien_wave()
    assert len(wave) == NUMBER_OF_ALIENS_IN_ROW * 5
    assert {a.y for a in wave} == {ALIEN_SIZE * r for r in range(1, 6)}


def test_wave_row_types():
    wave = spawn_alien_wave()
    by_row = {}
    for alien in wave:
        by_row.setdefault(alien.y, set()).add(alien.alien_type)
    assert by_row[ALIEN_SIZE] == {AlienType.SQUID}
    assert by_row[ALIEN_SIZE * 2] == {AlienType.ARM}
    assert by_row[ALIEN_SIZE * 3] == {AlienType.ARM}
    assert by_row[ALIEN_SIZE * 4] == {AlienType.FOOT}
    assert by_row[ALIEN_SIZE * 5] == {AlienType.FOOT}


def test_wave_columns_are_evenly_spaced():
    wave = spawn_alien_wave()
    xs = sorted({a.x for a in wave})
    assert xs[0] == PADDING
    assert len(xs) == NUMBER_OF_ALIENS_IN_ROW
    assert all(b - a == ALIEN_SIZE for a, b in zip(xs, xs[1:]))


def test_wave_points_match_types():
    assert all(a.points_value == alien_points(a.alien_type) for a in spawn_alien_wave())