"""State of the search panel: column selection and collapsible option groups."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntFlag


class GroupBoxType(IntFlag):
    NONE = 0x00
    SEARCH_RANGE = 0x01
    MATCH_CONTROL = 0x02
    FILES = 0x04
    TIME = 0x08
    OPERATION = 0x10
    ALL = SEARCH_RANGE | MATCH_CONTROL | FILES | TIME | OPERATION


_SINGLE_BOXES = (
    GroupBoxType.SEARCH_RANGE,
    GroupBoxType.MATCH_CONTROL,
    GroupBoxType.FILES,
    GroupBoxType.TIME,
    GroupBoxType.OPERATION,
)


@dataclass
class CheckSelection:
    """A list of checkable options with "select all" and "select none" controls.

    ``on_change`` is called with the selected options whenever the
    selection is changed through the selection controls or a toggle.
    """

    on_change: Callable[[list[str]], None] | None = None
    all_checked: bool = False
    none_checked: bool = False
    _options: list[list] = field(default_factory=list, repr=False)

    @property
    def options(self) -> list[str]:
        return [text for text, _ in self._options]

    def _notify(self, selection: list[str]) -> None:
        if self.on_change is not None:
            self.on_change(selection)

    def set_options(self, options: Iterable[str]) -> None:
        """Replace the options; every new option starts checked."""
        self.clear()
        self._options = [[text, True] for text in options]

    def clear(self) -> None:
        self._options = []

    def selected(self) -> list[str]:
        return [text for text, checked in self._options if checked]

    def set_selected(self, selected_options: Iterable[str]) -> None:
        wanted = set(selected_options)
        for entry in self._options:
            entry[1] = entry[0] in wanted
        selection = self.selected()
        self.all_checked = bool(self._options) and len(selection) == len(self._options)
        self._notify(selection)

    def select_all(self, checked: bool) -> None:
        """Check or uncheck every option."""
        for entry in self._options:
            entry[1] = checked
        self.all_checked = checked
        if checked:
            self.none_checked = False
        self._notify(self.selected())

    def select_none(self) -> None:
        for entry in self._options:
            entry[1] = False
        self.none_checked = True
        self.all_checked = False
        self._notify(self.selected())

    def toggle(self, option: str, checked: bool) -> None:
        """Set one option's state; raises KeyError for an unknown option."""
        entry = next((entry for entry in self._options if entry[0] == option), None)
        if entry is None:
            raise KeyError(option)
        if entry[1] == checked:
            return
        entry[1] = checked
        selection = self.selected()
        all_selected = bool(self._options) and len(selection) == len(self._options)
        if all_selected:
            self.all_checked = True
            self.none_checked = not selection
        else:
            self.all_checked = False
            self.none_checked = False
        self._notify(selection)


@dataclass
class SearchPanel:
    """Which option groups are shown and expanded, plus the match settings."""

    search_range: CheckSelection = field(default_factory=CheckSelection)
    visible: GroupBoxType = GroupBoxType.ALL
    case_sensitive: bool = False
    match_whole_words: bool = False
    use_regular_expression: bool = False
    search_text: str = ""
    _expanded: dict[GroupBoxType, bool] = field(
        default_factory=lambda: {box: box is GroupBoxType.OPERATION for box in _SINGLE_BOXES},
        repr=False,
    )

    def set_visible_group_boxes(self, types: GroupBoxType) -> None:
        """Show and expand exactly the groups in ``types``; hide and collapse the rest."""
        self.visible = GroupBoxType(types)
        for box in _SINGLE_BOXES:
            self._expanded[box] = bool(types & box)

    def show_group_box(self, box_type: GroupBoxType, show: bool = True) -> None:
        """Show or hide one group; anything but a single group is ignored."""
        if box_type not in _SINGLE_BOXES:
            return
        if show:
            self.visible |= box_type
        else:
            self.visible &= ~box_type

    def hide_group_box(self, box_type: GroupBoxType) -> None:
        self.show_group_box(box_type, False)

    def is_expanded(self, box_type: GroupBoxType) -> bool:
        if box_type not in _SINGLE_BOXES:
            raise ValueError(f"not a single group box: {box_type!r}")
        return self._expanded[box_type]