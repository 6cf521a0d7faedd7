# boxpusher

Building blocks for a box-pushing puzzle in the style of Sokoban: the tile
model, the rules for spotting stuck boxes, and the small pieces of screen and
menu logic around them. It has no dependencies outside the standard library.

## Modules

- `boxpusher.attribute` – the board character codes (`CharName`), the object
  types they stand for (`ObjectType`) and the attribute bits of each type
  (`Att`). `char_type(ch)` maps a character to its type, `attributes_of(ch)`
  returns its bits and `has_attribute(ch, flag)` tests them. Codes outside
  0..127 raise `ValueError`.
- `boxpusher.glyphs` – 27-byte character glyphs (nine lines of three colour
  bytes). `vertical_shifts(shape)` gives the nine (top, bottom) cell pairs of a
  shape moved down 0..8 lines, `horizontal_shifts(shape)` the five (left, right)
  pairs moved right 0..4 pixels. `pill_glyph(mask)` and
  `small_pill_glyph(mask)` build the pill shapes with the colour lines chosen
  by bits 2/1/0 of `mask`. `BOX_SHAPE` is the box glyph.
- `boxpusher.deadlock` – `Board`, a grid of character codes addressed by a
  flat position (`get`, `set`, `index(col, row)`), and `check_deadlocks(board,
  position)`, which marks a box stuck in a wall corner, or a 2x2 block of
  boxes, as `CharName.BOX_DEADLOCK` and returns whether it found one. The
  helpers `is_wall`, `is_goal` and `is_box` classify single characters.
- `boxpusher.man` – joystick direction bits (`Direction`), `FaceDirection`,
  `joystick_delta(bits)` returning `(dx, dy)` for a bit combination, and
  `row_offset(direction, row_width)` giving the board offset of one step.
- `boxpusher.playfield` – `Playfield`, six playfield columns with one byte per
  scanline; `draw_bit(x, y)` sets a pixel (returning `False` when it falls off
  the arena) and `column(index)` returns a column's bytes. `reverse_bits` and
  `roll_order` give the bit-reversed byte and the line order used for colour
  interleaving.
- `boxpusher.menu` – `MenuState`, the title menu driven by joystick bits:
  one line picks the room, the other toggles the interleave option.
  `set_bounds(value, maximum)` wraps a value and `room_label(room)` formats a
  three-digit room number.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from boxpusher.attribute import CharName, Att, has_attribute
from boxpusher.deadlock import Board, check_deadlocks

W, B, _ = CharName.BRICKWALL, CharName.BOX, CharName.BLANK
board = Board(4, 3, [
    W, W, W, W,
    W, B, _, W,
    W, W, W, W,
])
check_deadlocks(board, board.index(1, 1))   # True: the box is stuck in a corner
board.get(board.index(1, 1)) == CharName.BOX_DEADLOCK   # True

has_attribute(CharName.BOX_CORRECT, Att.TARGETLIKE)     # True
```

```python
from boxpusher.man import Direction
from boxpusher.menu import MenuState

menu = MenuState(room_count=10)
menu.handle_joystick(0)                  # stick centred: input is accepted from now on
menu.handle_joystick(Direction.RIGHT)    # True: next room
menu.label                               # "001"
```

```python
from boxpusher.playfield import Playfield

pf = Playfield(192)
pf.draw_bit(0, 0)      # True
pf.column(0)[21]       # 16
```

## What it does not do

The package holds no levels and no level decoder, keeps no score, runs no game
loop and draws nothing to a screen or window: `Playfield` only fills byte
buffers. Character animation, colour palettes and TV-system handling are not
included either.