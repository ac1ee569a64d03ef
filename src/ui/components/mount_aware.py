import flet as ft


class MountAwareColumn(ft.Column): # type: ignore
    """
    Column that tracks whether it is on a page.

    Requests are never cancelled, so a response may land after the view was
    removed. `refresh` only pushes an update while mounted; state written
    after unmount is kept but not rendered.
    """
    def __init__(self) -> None:
        super().__init__()
        self.mounted = False

    def did_mount(self) -> None:
        self.mounted = True

    def will_unmount(self) -> None:
        self.mounted = False

    def refresh(self) -> None:
        if self.mounted:
            self.update()
