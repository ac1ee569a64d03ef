import flet as ft

from src.ui.components.panel import Panel
from src.ui.context import ServiceContext
from src.ui.views.person_create import PersonCreateView
from src.ui.views.person_delete import PersonDeleteView
from src.ui.views.person_list import PersonListView


class PeopleHome(ft.Row): # type: ignore
    """
    The container: lister, creator and deleter side by side.
    Nothing is passed between them; each talks to ctx.people_api itself.
    """
    def __init__(self, ctx: ServiceContext):
        super().__init__(
            vertical_alignment=ft.CrossAxisAlignment.START,
            wrap=True,
            spacing=16,
        )
        self.lister = PersonListView(ctx)
        self.creator = PersonCreateView(ctx)
        self.deleter = PersonDeleteView(ctx)
        self.controls = [
            Panel(self.lister),
            Panel(self.creator),
            Panel(self.deleter),
        ]
