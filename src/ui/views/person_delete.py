import flet as ft

from src.components.people import (
    DeleterState,
    FieldChanged,
    IdRejected,
    PersonDeleted,
    RequestFailed,
    RequestStarted,
    parse_person_id,
    reduce_deleter,
    run_delete,
)
from src.components.people.models import DeleterEvent
from src.ui.components.mount_aware import MountAwareColumn
from src.ui.context import ServiceContext


class PersonDeleteView(MountAwareColumn):
    """Same form as PersonCreateView, but the field holds a person id."""

    def __init__(self, ctx: ServiceContext) -> None:
        super().__init__()
        self.ctx = ctx
        self.state = DeleterState()

        self.id_field = ft.TextField(
            label="person id",
            width=260,
            on_change=self.id_changed,
            on_submit=self.submit,
        )
        self.error_text = ft.Text(color="error", visible=False)
        self.controls = [
            self.id_field,
            ft.ElevatedButton("Delete", on_click=self.submit),
            self.error_text,
        ]

    def id_changed(self, e: ft.ControlEvent | None = None) -> None:
        self.dispatch(FieldChanged(self.id_field.value or ""))

    def submit(self, e: ft.ControlEvent | None = None) -> None:
        if parse_person_id(self.state.person_id_text) is not None:
            self.dispatch(RequestStarted())

        output = run_delete(self.state.person_id_text, self.ctx.people_api, self.ctx.events)
        if not output.requested:
            self.dispatch(IdRejected(self.state.person_id_text))
        elif output.failure is not None:
            self.dispatch(RequestFailed(output.failure))
        elif output.person_id is not None:
            self.dispatch(PersonDeleted(output.person_id))

    def dispatch(self, event: DeleterEvent) -> None:
        self.state = reduce_deleter(self.state, event)
        message = self._error_message()
        self.error_text.visible = self.ctx.surface_errors and message is not None
        self.error_text.value = message
        self.refresh()

    def _error_message(self) -> str | None:
        if self.state.rejected_text is not None:
            return f"{self.state.rejected_text!r} is not a person id."
        if self.state.error is not None:
            return f"Could not delete person: {self.state.error.describe()}"
        return None
