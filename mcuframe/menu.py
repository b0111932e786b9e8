"""Hierarchical menu driven by up, down, select and back events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

MenuCallback = Callable[["SimpleMenu"], None]


@dataclass
class ValueRef:
    """A mutable integer that a value menu edits in place."""

    value: int = 0


class SimpleMenu:
    """One node of a menu tree.

    A node is either a list of submenus, a value editor bound to a
    :class:`ValueRef`, a function entry, or a list whose entries are
    probed through ``list_callback(index)``. Drawing is left to the
    display and value callbacks handed to :meth:`begin`.
    """

    def __init__(
        self,
        name=None,
        submenus: Optional[Sequence["SimpleMenu"]] = None,
        value: Optional[ValueRef] = None,
        minimum=None,
        maximum=None,
        callback: Optional[Callable[[], None]] = None,
        list_callback: Optional[Callable[[int], bool]] = None,
        sub_list_menu: Optional["SimpleMenu"] = None,
    ):
        if (minimum is None) != (maximum is None):
            raise ValueError("minimum and maximum must be given together")
        if submenus is not None:
            submenus = list(submenus)
            if not submenus:
                raise ValueError("a submenu list must not be empty")
        self.name = name
        self.select_menu = False
        self.menu_location = 0
        self._top: Optional[SimpleMenu] = None
        self._submenus: Optional[list[SimpleMenu]] = submenus
        self._sub_list_menu = sub_list_menu
        self._value = value
        self._callback = callback
        self._list_callback = list_callback
        self._display_callback: Optional[MenuCallback] = None
        self._value_callback: Optional[MenuCallback] = None
        self._min = minimum
        self._max = maximum
        self._min_max_set = minimum is not None

    @property
    def _item_count(self) -> int:
        return len(self._submenus) if self._submenus is not None else 0

    @property
    def _selected(self) -> "SimpleMenu":
        return self._submenus[self.menu_location]

    def begin(self, display_callback=None, value_callback=None, top=None):
        """Reset the cursor and draw; with ``top`` the menu is entered from a parent.

        Callbacks already set are kept. A function entry entered from a
        parent runs its callback and hands control straight back.
        """
        self.select_menu = False
        self.menu_location = 0
        if self._display_callback is None:
            self._display_callback = display_callback
        if self._value_callback is None:
            self._value_callback = value_callback
        if top is not None:
            self._top = top
            if self._callback is not None and self._list_callback is None:
                self._callback()
                self._top.returned()
        self.print()

    def set_functions(self, display_callback, value_callback):
        """Replace the display and value callbacks."""
        self._display_callback = display_callback
        self._value_callback = value_callback

    def home(self):
        """Leave any open submenu and show this level."""
        if self._sub_list_menu is not None:
            self._sub_list_menu.back()
        if self._submenus is not None:
            self._selected.back()
        self.select_menu = False
        self.print()

    def select(self):
        """Enter or activate the entry under the cursor."""
        if self.menu_location == -1:
            if self._top is not None:
                self._top.returned()
        elif self._callback is not None and self._list_callback is not None:
            self._callback()
        elif self.select_menu and self._submenus is not None:
            self._selected.select()
        elif self._submenus is not None:
            self.select_menu = True
            self._selected.begin(self._display_callback, self._value_callback, self)
        elif self.select_menu and self._sub_list_menu is not None:
            self._sub_list_menu.select()
        elif self._sub_list_menu is not None:
            self.select_menu = True
            self._sub_list_menu.begin(self._display_callback, self._value_callback, self)
        elif self._value is not None and self._top is not None:
            self._top.returned()
        self.print()

    def back(self):
        """Leave the innermost open submenu."""
        if (
            self.select_menu
            and self._sub_list_menu is not None
            and self._sub_list_menu.select_menu
        ):
            self._sub_list_menu.back()
        elif (
            self.select_menu
            and self._submenus is not None
            and self._selected.select_menu
        ):
            self._selected.back()
        elif self._submenus is not None:
            self.select_menu = False
        elif self._top is not None:
            self._top.returned()
        self.print()

    def returned(self):
        """A submenu handed control back to this menu."""
        self.select_menu = False
        self.print()

    def _route(self, action: str, value_step: Callable[[int], int], move: Callable[[int], int]):
        if self.select_menu and self._sub_list_menu is not None:
            getattr(self._sub_list_menu, action)()
        elif self.select_menu:
            getattr(self._selected, action)()
        elif self._value is not None:
            self._value.value = value_step(self._value.value)
        else:
            self.menu_location = move(self.menu_location)
        self.print()

    def up(self):
        """Move the cursor up, or increase the edited value."""
        self._route("up", lambda v: v + 1, lambda loc: loc - 1)

    def down(self):
        """Move the cursor down, or decrease the edited value."""
        self._route("down", lambda v: v - 1, lambda loc: loc + 1)

    def index(self, index):
        """Jump the cursor, or set the edited value, to ``index``."""
        if self.select_menu and self._sub_list_menu is not None:
            self._sub_list_menu.index(index)
        elif self.select_menu:
            self._selected.index(index)
        elif self._value is not None:
            self._value.value = index
        else:
            self.menu_location = index
        self.print()

    def next(self, offset=1):
        """The submenu ``offset`` entries from the cursor, or ``None``."""
        if self.select_menu and self._submenus is not None:
            return self._selected.next(offset)
        target = self.menu_location + offset
        if 0 <= target < self._item_count:
            return self._submenus[target]
        if self.select_menu and self._sub_list_menu is not None:
            return self._sub_list_menu.next(offset)
        return None

    def print(self):
        """Clamp the cursor and value, then draw the active menu."""
        if self._min_max_set:
            if self._value.value < self._min:
                self._value.value = self._min
            if self._value.value > self._max:
                self._value.value = self._max
        if self.menu_location < 0:
            self.menu_location = 0
        if self._submenus is not None and self.menu_location >= self._item_count:
            self.menu_location = self._item_count - 1

        if self.select_menu and self._submenus is not None:
            self._selected.print()
        elif (
            self.select_menu
            and self._sub_list_menu is not None
            and self._list_callback is not None
        ):
            self._sub_list_menu.print()
        elif self._value is not None:
            if self._value_callback is not None:
                self._value_callback(self)
        elif self._list_callback is not None:
            exists = self._list_callback(self.menu_location)
            while not exists and self.menu_location > -1:
                self.menu_location -= 1
                exists = self._list_callback(self.menu_location)
            if self.menu_location < -1:
                self.menu_location = -1
                self.back()
        elif self._submenus is not None:
            if self._display_callback is not None:
                self._display_callback(self._selected)

    def has_value(self):
        """Whether this menu edits a value."""
        return self._value is not None

    def get_value(self):
        """The edited value."""
        if self._value is None:
            raise ValueError(f"menu {self.name!r} has no value")
        return self._value.value

    def get_index(self):
        """Position of the cursor."""
        return self.menu_location