# textarea_core

Building blocks for a multi-line text editor widget in a terminal, kept
apart from any particular terminal library. The pieces hold the logic for
highlighting a line, keeping an undo history, searching, describing key
input and describing scroll requests; a front end renders and drives them.

## Modules

- `textarea_core.style`: `Color` (named terminal colors), `Style` (a frozen
  pair of optional `fg` and `bg` colors, with `with_fg` and `with_bg`
  returning changed copies) and `Span` (a `content` string with a `style`).
- `textarea_core.highlight`:
  - `LineHighlighter(line, cursor_style, tab_len, mask, select_style)`
    collects highlights for one line with `line_number`, `cursor_line`,
    `search` and `selection`, then `into_spans()` returns a list of `Span`s.
    Offsets given to `search` and `selection` are character indices. Where
    highlights meet, the cursor wins over search matches, and search matches
    win over the selection. A cursor or selection running past the end of
    the line adds a trailing one-space span in its style.
  - `DisplayTextBuilder(tab_len, mask)` expands tabs to the next tab stop,
    counting the display width of wide characters, or, with a `mask`
    character, replaces every character with it. A tab length of 0 drops tabs.
  - `extract_segment_spans(spans, start, end)` cuts a character range out of
    a list of spans, keeping each piece's style.
- `textarea_core.history`: `Pos` (row, character column, offset), `EditKind`
  (insert/delete of a character, newline, string or multi-line chunk, with
  `invert()`), `apply_edit`, `Edit` (with `redo`, `undo`, `cursor_before`,
  `cursor_after`) and `History(max_items)`. `History.push` drops edits that
  were undone and the oldest edit once full; `undo` and `redo` return the
  new cursor `(row, col)` or `None` when there is nothing to do. A
  `max_items` of 0 turns the history off.
- `textarea_core.search`: `Search`, holding an optional compiled `re` pattern
  and a highlight style (blue background by default). `set_pattern("")`
  clears the pattern; an invalid pattern raises `re.error`. `matches(line)`
  yields `(start, end)` of each match, or is `None` without a pattern.
  `forward` and `back` find the next or previous match from a cursor,
  wrapping around the text, and return `(row, col)` or `None`; with
  `match_cursor` true a match at the cursor itself counts.
- `textarea_core.input`: `KeyCode`, `Key` (with `Key.char(c)` and
  `Key.function(n)`; the default key is `NULL`) and `Input` (a key with
  `ctrl`, `alt` and `shift` flags). Both serialize to and from compact JSON
  with `to_json` / `from_json`; invalid data raises `ValueError`.
- `textarea_core.scroll`: `ScrollKind` and `Scrolling`: a delta of rows and
  columns (16-bit signed), a page or half a page up or down.
  `Scrolling.deltas(height, wrap_enabled)` turns a request into the
  `(rows, cols)` to scroll for a viewport of the given height; horizontal
  scrolling is dropped when wrapping is on. JSON round trips as for input.

## What it does not do

There is no text area widget here: nothing holds a buffer with a cursor,
moves the cursor by words or paragraphs, maps key input to edits, draws to
a screen or reads events from a terminal. Those are left to the program
that uses these pieces.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Examples

Highlighting a line with the cursor on it:

```python
from textarea_core.highlight import LineHighlighter
from textarea_core.style import Color, Style

cursor = Style().with_bg(Color.RED)
selection = Style().with_bg(Color.BLUE)
line_style = Style().with_bg(Color.GRAY)

lh = LineHighlighter("a\tb", cursor, 4, None, selection)
lh.cursor_line(1, line_style)
for span in lh.into_spans():
    print(repr(span.content), span.style)
# 'a'   in the line style
# '   ' in the cursor style (the tab, expanded to the next tab stop)
# 'b'   in the line style
```

Undo and redo:

```python
from textarea_core.history import Edit, EditKind, History, Pos

lines = ["ab"]
history = History(50)
edit = Edit(EditKind.INSERT_CHAR, "x", Pos(0, 1, 1), Pos(0, 2, 2))
edit.redo(lines)
history.push(edit)
assert lines == ["axb"]
assert history.undo(lines) == (0, 1)
assert lines == ["ab"]
assert history.redo(lines) == (0, 2)
```

Searching:

```python
from textarea_core.search import Search

search = Search()
search.set_pattern("fo+")
lines = ["fooo foo", "foo fo foo fooo", "foooo"]
assert search.forward(lines, (1, 4), False) == (1, 7)
assert search.back(lines, (1, 4), False) == (1, 0)
```

Key input and scrolling as JSON:

```python
from textarea_core.input import Input, Key
from textarea_core.scroll import Scrolling

key = Key.char("a")
assert key.to_json() == '{"Char":"a"}'
assert Key.from_json(key.to_json()) == key

inp = Input(key, ctrl=True, shift=True)
assert inp.to_json() == '{"key":{"Char":"a"},"ctrl":true,"alt":false,"shift":true}'

scroll = Scrolling.delta(1, 2)
assert scroll.to_json() == '{"Delta":{"rows":1,"cols":2}}'
assert Scrolling.from_json(scroll.to_json()) == scroll
```