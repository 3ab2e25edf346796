# jeditr

A small, dependency-free model of user-interface elements: colours, padding,
borders and styles, element state with unique identifiers, UI messages, and
button and container widgets that are configured with chained calls.

## Installation

```
pip install jeditr
```

For running the test suite:

```
pip install "jeditr[test]"
pytest
```

## Styles

`jeditr.style` holds immutable (frozen) dataclasses.

```python
from jeditr.style import Border, BorderRadius, Color, Padding, Style

red = Color.rgb(1.0, 0.0, 0.0)          # alpha is 1.0
glass = Color.rgba(1.0, 1.0, 1.0, 0.5)
# Ready-made colours: Color.TRANSPARENT, Color.BLACK, Color.WHITE

pad = Padding.uniform(8.0)
pad_hv = Padding.horizontal_vertical(12.0, 4.0)  # left/right 12, top/bottom 4

border = Border(Color.BLACK, 2.0, BorderRadius.uniform(5.0))

style = Style()  # no padding, black background, 1px black border with radius 2
```

`Style.background` and `Style.border` may be `None`.

## Widgets

`jeditr.widgets` provides `ButtonState` and `ContainerState`. Each builder
method returns a new widget with the changed style and leaves the original
untouched, so calls can be chained:

```python
from jeditr.style import Border, BorderRadius, Color, Padding
from jeditr.widgets import ButtonState

button = (
    ButtonState("Click me")
    .padding(Padding.uniform(5.0))
    .background_color(Color.WHITE)
    .border(Border(Color.BLACK, 1.0, BorderRadius.uniform(3.0)))
    .with_border_radius(BorderRadius.uniform(4.0))
)

assert button.base.style.border.radius.top_left == 4.0
assert not button.is_pressed and not button.is_hovered
```

`with_border_radius` only takes effect when the widget has a border; with no
border it stays `None`. `ContainerState` offers the same builder methods and
also holds a list of child widgets in `children`.

## Element state

```python
from jeditr.state import ElementId, ElementState, UiState
from jeditr.widgets import ButtonState

button = ButtonState("OK")
ui = UiState().with_root(button.base.id).add_element(button.base.id, button)
```

`ElementId.new()` creates a fresh identifier from a random UUID; ids are
hashable and compare by value. `ElementState` holds an id, a list of child
ids, a visibility flag (`True` by default) and a `Style`; its `padding` method
returns a copy with new padding. `UiState.with_root` and
`UiState.add_element` change the state in place and return it.

## Messages

`jeditr.message` defines the events a UI element can receive, all subclasses
of `UiMessage` and all naming the target element by its `ElementId`:

- `Click(id)`
- `Hover(id, hovered)`
- `KeyPress(id, key)` — `key` is a key name string
- `TextInput(id, text)`
- `Resize(id, width, height)` — width and height must lie between 0 and
  2**32 - 1, otherwise `ValueError` is raised

## What it does not do

This package is only the data model. It opens no windows, draws nothing,
runs no event loop and does not turn real input into messages; there is no
command to start.