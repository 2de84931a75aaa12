"""UI surface driven by the workflow controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from ..core.constants import UIConstants
from ..core.models import Interpretation


class AnalysisView(Protocol):
    def set_status(self, message: str, category: str = "loading") -> None:
        ...

    def show_error(self, text: str) -> None:
        ...

    def hide_error(self) -> None:
        ...

    def set_action_enabled(self, enabled: bool) -> None:
        ...

    def set_loading(self, loading: bool) -> None:
        ...

    def show_review(self, text: str) -> None:
        ...

    def show_result(self, interpretation: Interpretation) -> None:
        ...

    def hide_result(self) -> None:
        ...

    def set_credential(self, value: str) -> None:
        ...


@dataclass
class ViewState:
    """Plain record of everything the page displays.

    Front ends render from it after each command. It holds no toolkit
    objects, so it can live in ``st.session_state`` or be inspected
    directly.
    """

    status_message: str = ""
    status_category: str = "loading"
    error_message: str = ""
    error_visible: bool = False
    action_enabled: bool = False
    loading: bool = False
    review_text: str = ""
    result: Optional[Interpretation] = None
    result_visible: bool = False
    credential: str = ""
    # Called after every status change, for front ends that paint mid-command.
    on_status: Optional[Callable[[ViewState], None]] = field(default=None, repr=False, compare=False)

    @property
    def status_icon(self) -> str:
        return UIConstants.STATUS_ICONS[self.status_category]

    def set_status(self, message: str, category: str = "loading") -> None:
        if category not in UIConstants.STATUS_ICONS:
            raise ValueError(f"Unknown status category: {category}")
        self.status_message = message
        self.status_category = category
        if self.on_status is not None:
            self.on_status(self)

    def show_error(self, text: str) -> None:
        self.error_message = text
        self.error_visible = True

    def hide_error(self) -> None:
        self.error_visible = False

    def set_action_enabled(self, enabled: bool) -> None:
        self.action_enabled = enabled

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def show_review(self, text: str) -> None:
        self.review_text = text

    def show_result(self, interpretation: Interpretation) -> None:
        self.result = interpretation
        self.result_visible = True

    def hide_result(self) -> None:
        self.result_visible = False

    def set_credential(self, value: str) -> None:
        self.credential = value
