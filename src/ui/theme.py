import flet as ft


class AppTheme:
    """
    Light and dark themes. The views only read the primary and error
    roles, and error stays the same red in both modes.
    """

    error = "#c0392b"
    primary_light = "#1f4e79"
    primary_dark = "#5dade2"

    @classmethod
    def _theme(cls, primary: str) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(primary=primary, error=cls.error),
            use_material3=True,
        )

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return cls._theme(cls.primary_light)

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return cls._theme(cls.primary_dark)
