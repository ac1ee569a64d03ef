import logging
from collections.abc import Callable

import flet as ft

from src.components.people import (
    ListerState,
    ListLoaded,
    Mutation,
    RequestFailed,
    RequestStarted,
    reduce_lister,
    render_names,
    run_list,
)
from src.components.people.models import ListerEvent
from src.ui.components.mount_aware import MountAwareColumn
from src.ui.context import ServiceContext

logger = logging.getLogger(__name__)


class PersonListView(MountAwareColumn):
    """Fetches the people collection once on mount and lists their names."""

    def __init__(
        self,
        ctx: ServiceContext,
        run_in_background: Callable[[Callable[[], None]], object] | None = None,
    ) -> None:
        super().__init__()
        self.ctx = ctx
        # Defaults to page.run_thread once mounted
        self._run_in_background = run_in_background
        self.state = ListerState()
        self._unsubscribe: Callable[[], None] | None = None

        self.items = ft.Column(spacing=4)
        self.error_text = ft.Text(color="error", visible=False)
        self.controls = [
            ft.Text("People", size=20, weight=ft.FontWeight.BOLD),
            self.items,
            self.error_text,
        ]

    def did_mount(self) -> None:
        super().did_mount()
        if self.ctx.events is not None:
            self._unsubscribe = self.ctx.events.subscribe(self._on_mutation)
        # Off the UI loop so mounting never waits on the network
        run = self._run_in_background or self.page.run_thread
        run(self.load)

    def will_unmount(self) -> None:
        super().will_unmount()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def load(self) -> None:
        self.dispatch(RequestStarted())
        output = run_list(self.ctx.people_api)
        if output.failure is not None:
            self.dispatch(RequestFailed(output.failure))
        else:
            self.dispatch(ListLoaded(output.people))

    def dispatch(self, event: ListerEvent) -> None:
        self.state = reduce_lister(self.state, event)
        self.render()

    def render(self) -> None:
        self.items.controls = [
            ft.Text(name, key=key) for key, name in render_names(self.state)
        ]
        error = self.state.error
        self.error_text.visible = self.ctx.surface_errors and error is not None
        self.error_text.value = f"Could not load people: {error.describe()}" if error else None
        self.refresh()

    def _on_mutation(self, mutation: Mutation) -> None:
        logger.debug(f"Reloading people after {mutation.kind} of {mutation.person_id}")
        self.load()
