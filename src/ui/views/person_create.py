import flet as ft

from src.components.people import (
    CreatorState,
    FieldChanged,
    PersonCreated,
    RequestFailed,
    RequestStarted,
    reduce_creator,
    run_create,
)
from src.components.people.models import CreatorEvent
from src.ui.components.mount_aware import MountAwareColumn
from src.ui.context import ServiceContext


class PersonCreateView(MountAwareColumn):
    def __init__(self, ctx: ServiceContext) -> None:
        super().__init__()
        self.ctx = ctx
        self.state = CreatorState()

        self.name_field = ft.TextField(
            label="person name",
            width=260,
            on_change=self.name_changed,
            on_submit=self.submit,
        )
        self.error_text = ft.Text(color="error", visible=False)
        self.controls = [
            self.name_field,
            ft.ElevatedButton("Add name", on_click=self.submit),
            self.error_text,
        ]

    def name_changed(self, e: ft.ControlEvent | None = None) -> None:
        self.dispatch(FieldChanged(self.name_field.value or ""))

    def submit(self, e: ft.ControlEvent | None = None) -> None:
        # No navigation and no reset: the typed name stays in the field.
        self.dispatch(RequestStarted())
        output = run_create(self.state.name, self.ctx.people_api, self.ctx.events)
        if output.person is not None:
            self.dispatch(PersonCreated(output.person))
        elif output.failure is not None:
            self.dispatch(RequestFailed(output.failure))

    def dispatch(self, event: CreatorEvent) -> None:
        self.state = reduce_creator(self.state, event)
        error = self.state.error
        self.error_text.visible = self.ctx.surface_errors and error is not None
        self.error_text.value = f"Could not add person: {error.describe()}" if error else None
        self.refresh()
