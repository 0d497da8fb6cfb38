# minigin

A small, component-based 2D game engine built on pygame, together with a set
of building blocks for a Q*bert-style arcade game.

## What it offers

- **Game objects and components** (`minigin.gameobject`) – `GameObject` holds
  a list of `Component` instances and a position in a parent/child hierarchy.
  World positions are computed lazily from local positions and recomputed when
  a parent moves. Components are created with `add_component`, looked up by
  type with `get_component` and `has_component`, and removed with
  `remove_component` or `remove_component_instance`.
- **Movement components** (`minigin.components`) – `RotationComponent` moves
  its owner on a circle; `TranslationComponent.translate` shifts it by an
  offset.
- **Scenes** (`minigin.scene`) – a `Scene` owns game objects. Objects passed
  to `add` join at the end of the next `update`; objects marked with
  `mark_for_destroy` are dropped at the next update; `remove_all` clears the
  scene at the start of the next update. `SceneManager` creates scenes by name
  and forwards update and render calls to the active one.
- **Rendering** (`minigin.renderer`, `minigin.rendering_components`) –
  `Renderer` draws onto a pygame surface. `TextureComponent` draws a texture,
  or a source rectangle of a sprite sheet, and scenes draw these from lowest
  to highest depth; `TextComponent` draws a line of text on top.
- **Resources** (`minigin.resources`) – `ResourceManager` loads `Texture2D`
  and `Font` objects relative to a data directory, caches them, and can forget
  the ones nothing else still uses. Load failures raise `ResourceError`.
- **Input** (`minigin.input`, `minigin.controller`) – `InputManager` binds
  keyboard keys and controller buttons to `Command` objects for the
  `InputState` values `DOWN`, `UP` and `PRESSED`. `ControllerInput` handles
  gamepad buttons named by `GamepadButton`.
- **Commands and events** (`minigin.commands`, `minigin.events`) – `Command`
  and `FunctionCommand` wrap actions; `Event` lets handlers subscribe, hands
  back an id to unsubscribe with, and calls every handler on `invoke`.
- **Sound** (`minigin.sound`) – `SoundService` loads and plays sounds on a
  background worker thread through an `AudioBackend` (pygame's mixer by
  default). `SoundServiceLocator` hands out the registered service and falls
  back to a silent `NullSoundService` until one is registered.
- **Engine** (`minigin.engine`) – `Minigin` opens the window, sets up the
  renderer and resource manager, and runs the input/update/render loop.
- **Q*bert pieces** (`minigin.qbert`) – sprite-sheet `AnimationComponent`,
  `JumpMovement` and `FallMovement`, `HealthComponent`, `FPSComponent`,
  `KillCommand`, a `DiscManager` for the flying discs, and a high-score table
  stored per game mode.

## A first scene

```python
from minigin.engine import Minigin
from minigin.gameobject import GameObject
from minigin.components import RotationComponent
from minigin.scene import SceneManager

with Minigin("data") as engine:
    scene = SceneManager.get_instance().create_scene("Demo")

    centre = GameObject()
    centre.set_local_position((320.0, 240.0, 0.0))

    orbiter = GameObject()
    orbiter.set_parent(centre, False)
    orbiter.add_component(RotationComponent, 50.0, 180.0)

    scene.add(centre)
    scene.add(orbiter)
    SceneManager.get_instance().set_active_scene("Demo")

    engine.run(600)
```

The orbiter circles the centre point 50 pixels away at 180 degrees per
second. `run` stops after the given number of frames, or when the window is
closed, and returns the number of frames run.

## Events

```python
from minigin.events import Event

scored = Event()
handler_id = scored.subscribe(lambda points: print("scored", points))
scored(100)
scored.unsubscribe(handler_id)
```

## High scores

```python
from minigin.qbert.highscores import read_high_scores, save_high_score

save_high_score("solo", "ALICE", 4200, "scores")
for name, points in read_high_scores("solo", "scores"):
    print(name, points)
```

The mode may be a name such as `"solo"`, `"coop"` or `"versus"`, or an enum
member with such a name. Each mode has its own file of `name,score` lines;
only the ten best entries are kept, highest first.

## What it does not do

The package provides the engine and individual gameplay pieces, not a
finished game: there are no player or enemy characters, no pyramid levels or
tiles, no menus and no command that launches a game. These have to be built
on top of the classes above.

## Running the tests

The test suite uses pytest, which comes with the `test` extra.