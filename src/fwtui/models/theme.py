"""Colour palettes for every theme variant."""

from pydantic import BaseModel, ConfigDict

from .enums import ThemeVariant


class Theme(BaseModel):
    """A resolved colour palette.

    Colours are CSS colour strings that Textual and Rich both understand.
    """

    model_config = ConfigDict(frozen=True)

    variant: ThemeVariant
    background: str
    border: str
    border_active: str
    indication_ok: str
    indication_warning: str
    brightness_bar: str
    charge_bar: str
    highlighted_text: str
    informative_text: str

    @classmethod
    def from_variant(cls, variant: ThemeVariant) -> "Theme":
        """Build the palette for a theme variant."""
        return cls(variant=variant, **_PALETTES[variant])


def _palette(
    background: str,
    border: str,
    border_active: str,
    ok: str,
    warning: str,
    accent: str,
) -> dict[str, str]:
    # Every palette reuses the active border colour for brightness bars,
    # the border colour for highlights and the accent for charge bars/info text.
    return {
        "background": background,
        "border": border,
        "border_active": border_active,
        "indication_ok": ok,
        "indication_warning": warning,
        "brightness_bar": border_active,
        "charge_bar": accent,
        "highlighted_text": border,
        "informative_text": accent,
    }


_PALETTES: dict[ThemeVariant, dict[str, str]] = {
    ThemeVariant.FRAMEWORK: _palette(
        "#000000", "#FF7447", "#FFD600", "#00B16A", "#E53935", "#9481D8"
    ),
    ThemeVariant.ALUCARD: _palette(
        "#FFFBEB", "#A34D14", "#846E15", "#14710A", "#CB3A2A", "#644AC9"
    ),
    ThemeVariant.CATPPUCCIN_FRAPPE: _palette(
        "#232634", "#EF9F76", "#E5C890", "#A6D189", "#E78284", "#CA9EE6"
    ),
    ThemeVariant.CATPPUCCIN_LATTE: _palette(
        "#DCE0E8", "#FE640B", "#DF8E1D", "#40A02B", "#D20F39", "#8839EF"
    ),
    ThemeVariant.CATPPUCCIN_MACCHIATO: _palette(
        "#181926", "#F5A97F", "#EED49F", "#A6DA95", "#ED8796", "#C6A0F6"
    ),
    ThemeVariant.CATPPUCCIN_MOCHA: _palette(
        "#11111B", "#FAB387", "#F9E2AF", "#A6E3A1", "#F38BA8", "#CBA6F7"
    ),
    ThemeVariant.DRACULA: _palette(
        "#282A36", "#FFB86C", "#F1FA8C", "#50FA7B", "#FF5555", "#BD93F9"
    ),
    ThemeVariant.GITHUB_DARK: _palette(
        "#1B1F23", "#FFF8F2", "#FFFDEF", "#F0FFF4", "#FFEEF0", "#F5F0FF"
    ),
    ThemeVariant.GITHUB_LIGHT: _palette(
        "#FFFFFF", "#A04100", "#735C0F", "#144620", "#86181D", "#29134E"
    ),
    ThemeVariant.MONOKAI_PRO_LIGHT: _palette(
        "#FFFFFF", "#FC9768", "#FFD866", "#A9DC77", "#FF6189", "#AB9DF2"
    ),
}
