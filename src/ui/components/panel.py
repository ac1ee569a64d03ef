import flet as ft


class Panel(ft.Container): # type: ignore
    """
    Bordered card holding one people view, so the three sit side by side
    with equal weight.
    """
    def __init__(self, content: ft.Control, width: float | None = 320, padding: float = 16):
        super().__init__(
            content=content,
            width=width,
            padding=padding,
            border_radius=ft.border_radius.all(12),
            border=ft.border.all(1, "outlineVariant"),
            alignment=ft.alignment.top_left,
        )
