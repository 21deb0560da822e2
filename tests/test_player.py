from invaders.assets import sprites
from invaders.controls import InputState, Key
from invaders.player import (
    GAME_HEIGHT,
    GAME_WIDTH,
    PLAYER_MISSILE_SPEED,
    PLAYER_SPEED,
    Missile,
    new_player,
)


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play(self, name, volume=1.0):
        self.played.append(name)


def test_new_player_position():
    player = new_player()
    assert (player.width, player.height) == sprites().player.get_size()
    assert GAME_WIDTH - player.width - 2 * player.x in (0, 1)
    assert player.y + player.height + 8 == GAME_HEIGHT
    assert player.points == 0
    assert player.missiles == []


def test_moves_left_and_right():
    player = new_player()
    start = player.x
    player.update(InputState(held={Key.LEFT}))
    assert player.x == start - PLAYER_SPEED
    player.update(InputState(held={Key.D}))
    assert player.x == start


def test_clamped_to_screen():
    player = new_player()
    player.x = 1
    player.update(InputState(held={Key.A}))
    assert player.x == 0
    player.x = GAME_WIDTH - player.width
    player.update(InputState(held={Key.RIGHT}))
    assert player.x == GAME_WIDTH - player.width


def test_spawn_missile_is_centred():
    player = new_player()
    missile = player.spawn_missile()
    assert missile.y == player.y
    assert abs((missile.x + missile.width / 2) - (player.x + player.width / 2)) <= 1


def test_shooting_plays_sound_and_moves_missile():
    player = new_player()
    sounds = RecordingSounds()
    player.update(InputState(held={Key.SPACE}), sounds)
    assert len(player.missiles) == 1
    assert player.missiles[0].y == player.y - PLAYER_MISSILE_SPEED
    assert sounds.played == ["shoot"]


def test_cooldown_blocks_rapid_fire():
    player = new_player()
    fire = InputState(held={Key.SPACE})
    player.update(fire)
    player.update(fire)
    assert len(player.missiles) == 1
    for _ in range(1000):
        if player.shoot_timer.is_done():
            break
        player.update(InputState())
    assert player.shoot_timer.is_done()
    before = len(player.missiles)
    player.update(fire)
    assert len(player.missiles) == before + 1


def test_missiles_removed_off_top():
    player = new_player()
    gone = Missile(x=0, y=PLAYER_MISSILE_SPEED - 1, width=1, height=1)
    kept = Missile(x=0, y=PLAYER_MISSILE_SPEED, width=1, height=1)
    player.missiles = [gone, kept]
    player.update(InputState())
    assert player.missiles == [kept]
    assert kept.y == 0