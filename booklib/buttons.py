"""Stateless action buttons shared by the front ends."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class ActionVariant(str, Enum):
    """Semantic kind of an action; decides how the button is drawn."""
    ADD = "add"
    EDIT = "edit"
    REMOVE = "remove"

    @property
    def style(self) -> str:
        """Rich style for terminal rendering."""
        return {
            ActionVariant.ADD: "bold white on blue",
            ActionVariant.EDIT: "bold black on dark_orange",
            ActionVariant.REMOVE: "bold white on red",
        }[self]

    @property
    def streamlit_type(self) -> str:
        return "primary" if self is ActionVariant.ADD else "secondary"


@dataclass(frozen=True)
class ActionButton:
    label: str
    variant: ActionVariant
    on_click: Callable[[], Any]

    def activate(self) -> Any:
        return self.on_click()

    def markup(self) -> str:
        """Label wrapped in rich markup for the variant's style."""
        return f"[{self.variant.style}] {self.label} [/]"

    def render_streamlit(self, st, key: Optional[str] = None) -> bool:
        """Draw as a Streamlit button; the callback runs before the rerun."""
        return st.button(
            self.label,
            key=key,
            on_click=self.on_click,
            type=self.variant.streamlit_type,
        )
