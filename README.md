# checkpointer

This package holds the non-graphical core of a save-data backup manager. It has no dependencies
outside the standard library. It provides:

- **Selection state**
  - `checkpointer.multiselection.MultiSelection` toggles entry indices for batch actions and keeps
    them in the order they were picked.
  - `checkpointer.hid.PageCursor` tracks the highlighted entry in a paged grid. It can page
    backwards and forwards with wrap-around, and it can pull the index back inside the page with
    `correct_index`.
  - `checkpointer.widgets` has `Clickable` cells and a `Scrollable` list that shows them in pages
    of `visible_entries` rows.
- **Cheat management** (`checkpointer.cheats`)
  - `CheatManager.load` reads a cheat database from a plain JSON file. If that file is missing, it
    reads a bzip2-compressed JSON archive instead.
  - `cheat_names` lists the cheats of a title.
  - `build_cheat_file` builds the text of one build's cheat file.
  - `save` writes `<root>/<title id>/cheats/<build id>.txt`, one file per build.
  - `CheatSelection` tracks which cheats are selected, using the `SELECTED_MAGIC` prefix.
  - `read_existing_cheats` gathers the cheat files that are already in a folder.
- **Text layout**
  - `checkpointer.utf8` packs a character's UTF-8 bytes into one integer and unpacks it again.
  - `checkpointer.geometry.Rect` gives the union, intersection and point test of two rectangles.
  - `checkpointer.glyphmap` has `GlyphMap`, a hash map from packed code points to `GlyphData`, and
    `GlyphPacker`, which lays glyphs out row by row on cache textures.
  - `checkpointer.textlayout` splits text, measures it and word-wraps it to a column width. Widths
    come from a measuring function that you supply.
- **Drawing helpers** (`checkpointer.drawing`): the `Color` value, the rectangles of an outline, a
  colour that pulses towards white once per second, and `trim_to_fit`, which shortens text with an
  ellipsis.

## Installation

```
pip install checkpointer
```

To include the test requirements:

```
pip install "checkpointer[test]"
```

## Examples

Multi-selection:

```python
from checkpointer.multiselection import MultiSelection

selection = MultiSelection()
selection.toggle(3)
selection.toggle(5)
selection.toggle(3)
print(selection.selected_entries())  # [5]
```

Wrapping text to a column width. Here `len` is the measuring function:

```python
from checkpointer.textlayout import fit_to_column

lines = fit_to_column("the quick brown fox", 10, len, False)
print(lines)  # ['the quick ', 'brown fox']
```

Selecting and saving cheats:

```python
from checkpointer.cheats import CheatManager, CheatSelection

manager = CheatManager({"0100000000000001": {"BUILD01": {"Infinite HP": ["04000000 00000000 00000001"]}}})
selection = CheatSelection(manager.cheat_names("0100000000000001"), "")
selection.toggle_all()
manager.save("0100000000000001", selection.cells(), "contents")
# writes contents/0100000000000001/cheats/BUILD01.txt
```

## What the package does not do

- It has no command-line tool and no user interface. Nothing here draws to a screen, reads a
  controller or touch screen, or runs screens and overlays. The drawing and layout helpers only
  compute colours, rectangles and lines of text.
- It does not back up or restore save data itself, and it stores nothing apart from the cheat
  files written by `CheatManager.save`.
- It has no logger of its own and no timestamp or file-name helpers. Failures while loading or
  saving cheats go to the standard `logging` module.

## Running the tests

```
pytest
```