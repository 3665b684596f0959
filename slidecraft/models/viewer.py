"""Presentation viewer state."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from slidecraft.core.messages import DEFAULT_LOCALE, translate

from .presentation import Presentation
from .slide import Slide

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"

NEXT_KEYS = frozenset({"ArrowRight", " "})
PREVIOUS_KEYS = frozenset({"ArrowLeft"})


class ViewState(str, Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    READY = "ready"


@dataclass
class ViewerSession:
    """
    Maintains state for the slide viewer.

    Starts in LOADING, moves to UNAUTHENTICATED when the session check fails
    or to READY once a presentation is loaded. Navigation only acts in READY.
    """
    state: ViewState = ViewState.LOADING
    presentation: Optional[Presentation] = None
    current_index: int = 0
    redirect: Optional[str] = None
    locale: str = DEFAULT_LOCALE

    def on_session(self, authenticated: bool) -> None:
        """Apply the result of the session lookup."""
        if not authenticated:
            self.state = ViewState.UNAUTHENTICATED
            self.redirect = LOGIN_PATH

    def on_presentation_loaded(self, presentation: Presentation) -> None:
        if self.state is ViewState.UNAUTHENTICATED:
            return
        self.presentation = presentation
        self.current_index = 0
        self.state = ViewState.READY

    def on_load_failed(self) -> None:
        """A missing presentation sends the user back to the dashboard."""
        self.presentation = None
        self.redirect = DASHBOARD_PATH

    @property
    def slide_count(self) -> int:
        return len(self.presentation.slides) if self.presentation else 0

    @property
    def current_slide(self) -> Optional[Slide]:
        if self.state is not ViewState.READY or not self.slide_count:
            return None
        return self.presentation.slides[self.current_index]

    @property
    def position_label(self) -> str:
        return translate(
            "viewer.position",
            self.locale,
            current=self.current_index + 1,
            total=self.slide_count,
        )

    @property
    def can_go_next(self) -> bool:
        return self.state is ViewState.READY and self.current_index < self.slide_count - 1

    @property
    def can_go_previous(self) -> bool:
        return self.state is ViewState.READY and self.current_index > 0

    def next_slide(self) -> None:
        if self.can_go_next:
            self.current_index += 1

    def previous_slide(self) -> None:
        if self.can_go_previous:
            self.current_index -= 1

    def go_to(self, index: int) -> None:
        """Jump to a slide; out-of-range indexes are ignored."""
        if self.state is ViewState.READY and 0 <= index < self.slide_count:
            self.current_index = index

    def handle_key(self, key: str) -> None:
        if key in NEXT_KEYS:
            self.next_slide()
        elif key in PREVIOUS_KEYS:
            self.previous_slide()
