# invaders

A compact fixed-shooter arcade game played on a 320×240 field that is scaled
to fit the window and centred in it.

Twelve columns of aliens, five rows deep, march side to side, dropping a row
each time they reach an edge and speeding up as their numbers thin. Squid
aliens in the top row fire back, with at most three alien missiles on screen
at once. Four shield bases stand between you and the invaders; each block of
a base crumbles after three hits. Once you have shot ten aliens a UFO crosses
the top of the screen for bonus points, and after it is shot or flies off
another may follow after a random wait of 10 to 30 seconds.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, draws the game and plays the
sounds.

## Playing

```
invaders
```

Options:

| Option         | Effect                                                        |
|----------------|---------------------------------------------------------------|
| `--mute`       | Play without sound.                                           |
| `--frames N`   | Stop after `N` frames; `0` (the default) runs until the window is closed. |

The game runs at 60 frames per second. Close the window to quit.

The title screen starts the game when Space, Enter or Escape is held, when
`A`, `S`, `D` or `W` is pressed, or on a left or right mouse click.

| Action      | Keys                          |
|-------------|-------------------------------|
| Move left   | Left arrow or `A`             |
| Move right  | Right arrow or `D`            |
| Fire        | Space (half-second cooldown)  |

### Scoring

| Target               | Points |
|----------------------|--------|
| Squid (top row)      | 40     |
| Arm (middle rows)    | 20     |
| Foot (bottom rows)   | 10     |
| UFO                  | 100    |

You start with five lives, shown at the top right beside your score. Being
hit by an alien missile costs a life and clears every alien missile on
screen; after a pause of one and a half seconds you reappear at the centre.
A new wave arrives three seconds after the last alien falls.

The game ends when you run out of lives, and the end screen then shows your
final score. It also ends as soon as an alien reaches the bottom of the
field. On the end screen the same inputs as on the title screen start a
fresh game.

## Art and sound

Images and sounds are looked up in the `data` directory inside the installed
`invaders` package (for example `data/invaders/topInvader.png`,
`data/player/Player.png`, `data/audio/move.ogg`). This package does not ship
those files. Where an image is missing, a plain coloured rectangle of the
right size is drawn instead; where a sound is missing or audio is not
available, a warning is logged and the game carries on silently.

## Using it from Python

The command is `invaders.app:main`, which takes an optional argument list:

```python
from invaders.app import main

main(["--mute", "--frames", "600"])
```

The game rules can also be driven without a window.
`invaders.game_scene.GameScene` advances one frame per `update(controls)`,
where `controls` is an `invaders.controls.InputState` built from sets of
`Key` values held this frame and the frame before. It accepts its own sound
player and `random.Random`, and sets `game_over` when the game ends.
`invaders.scene_manager.SceneManager` holds the title, game and end scenes
and switches between them.

## Running the tests

```
pip install .[test]
pytest
```