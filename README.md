# trispace

The core rules of a small space trading and combat game, as a pure-Python library
with no third-party dependencies. It holds game state and the logic that acts on it:

- `trispace.util`: `Vec2`, `Vec3` (addition, subtraction, `scaled`, `dot`, `cross`,
  `length`, `normalized`), `distance3d`, `distance2d`, `clamp_angle`,
  `intersect_triangle` (ray/triangle, returns `(t, u, v)` or `None`),
  `check_hit_sphere`, `calc_rot_to_target`, `lerpf`, `lerpv3`, and the random
  helpers `randr` (integer in `0..max_value` inclusive) and `randf`.
- `trispace.quaternion`: `Quat` with `from_axis_angle`, `from_angles`,
  `to_axis_angle`, `to_matrix`, `normalized`, `inverse`, `rotate` and `*`
  for multiplication, plus `quat_look_at`.
- `trispace.effects`: `EffectPool` of timed sprite animations
  (`EffectType.EXPLOSION`, `EffectType.SPARKS`); `Effect.texture_offset()` gives the
  pixel offset of the current frame.
- `trispace.particles`: `ParticleSystem` with a fixed number of emitter slots;
  `create_emitter` returns the emitter or `None` when all slots are busy.
- `trispace.input`: `InputState` turns `KeyEvent`s into button states (`Key`);
  `key_pressed` tells whether a button is held, `key_up` whether it was released in
  the latest frame. `InputState(handheld=True)` uses the handheld key layout.
- `trispace.savegame`: `open_save(folder, name, writing, home=None)` returns a
  `SaveFile` (a context manager) for raw `write_element` / `read_element` calls.
  The folder is created under the home directory if needed; a file that cannot be
  opened raises `OSError`.
- `trispace.cargo`: `CargoType`, `price_for_cargo`, `name_for_cargo`,
  `unit_for_cargo`, `is_cargo_illegal`, `CargoHold`, `transfer_cargo` and
  `create_station_hold`.
- `trispace.equipment`: `EquipmentType`, `price_for_equipment`,
  `name_for_equipment`, `equipment_status` and `buy_equipment` for a `Player`.
- `trispace.comms`: `Comms`, the flashing radio-message display; `visible_text()`
  returns `(header, message)` while a message is being shown.

## Installation

```
pip install .
```

## Example

```python
import random

from trispace.cargo import CargoHold, CargoType, SystemCharacteristics, create_station_hold, transfer_cargo
from trispace.comms import Comms, SystemComm
from trispace.quaternion import Quat
from trispace.util import Vec3

chars = SystemCharacteristics(
    tech_level=5, government=2, water_diff=1, tree_diff=0,
    max_tech_level=10, max_government=5,
)
station = create_station_hold()
player = CargoHold(size=25, money=150)

if transfer_cargo(station, player, CargoType.FOOD, chars, limit=False):
    print(player.used(), player.money)

turn = Quat.from_axis_angle(Vec3(0.0, 1.0, 0.0), 1.5708)
print(turn.rotate(Vec3(0.0, 0.0, -1.0)))

comms = Comms(random.Random(1))
comms.set_system_message(SystemComm.FUEL_SCOOPS_DONE)
print(comms.visible_text())
```

Functions and classes that use randomness take a `random.Random` instance, so
results can be reproduced by seeding it.

## What it does not do

There is no playable game here: no window, rendering, sound or game loop, and no
command to run. Star systems, ships in flight, NPCs, contracts and the user
interface are not part of the package; `InputState` takes events you supply rather
than reading a keyboard, and save files hold whatever bytes you write to them.

## Running the tests

```
pip install .[test]
pytest
```