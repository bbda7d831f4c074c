"""Unit tests for dotgen.colors."""

import pytest

from dotgen.colors import HSV, RGB, RGBA, Color, ColorList, NamedColor, hsv_to_rgb, x11_color
from dotgen.x11 import X11_COLORS


class TestRGB:
    def test_render(self) -> None:
        assert RGB(255, 0, 0).render() == "#FF0000"
        assert RGB(1, 171, 205).render() == "#01ABCD"

    def test_rgba(self) -> None:
        assert RGBA(255, 0, 0, 128).render() == "#FF000080"

    def test_rgba_from_rgb(self) -> None:
        assert RGBA.from_rgb(RGB(0, 0, 255), 255).render() == "#0000FFFF"

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
    def test_channel_range(self, channels: tuple) -> None:
        with pytest.raises(ValueError):
            RGB(*channels)

    def test_is_color(self) -> None:
        assert isinstance(RGB(0, 0, 0), Color)


class TestHSV:
    def test_primary_red(self) -> None:
        assert hsv_to_rgb(0.0, 1.0, 1.0) == (255, 0, 0)
        assert HSV(0.0, 1.0, 1.0).render() == "#FF0000"

    def test_hue_one_wraps_to_zero(self) -> None:
        assert HSV(1.0, 0.7, 0.9).render() == HSV(0.0, 0.7, 0.9).render()
        assert HSV(1.0, 1.0, 1.0).hue == 0.0

    def test_cyan_sector(self) -> None:
        assert hsv_to_rgb(0.5, 1.0, 1.0) == (0, 255, 255)

    @pytest.mark.parametrize(
        "hue, expected",
        [
            (1 / 12, (255, 127, 0)),
            (3 / 12, (127, 255, 0)),
            (5 / 12, (0, 255, 127)),
            (7 / 12, (0, 127, 255)),
            (9 / 12, (127, 0, 255)),
            (11 / 12, (255, 0, 127)),
        ],
    )
    def test_each_sector(self, hue: float, expected: tuple) -> None:
        assert hsv_to_rgb(hue, 1.0, 1.0) == expected

    def test_sector_starts(self) -> None:
        assert [hsv_to_rgb(i / 6, 1.0, 1.0) for i in range(6)] == [
            (255, 0, 0),
            (255, 255, 0),
            (0, 255, 0),
            (0, 255, 255),
            (0, 0, 255),
            (255, 0, 255),
        ]

    def test_partial_saturation(self) -> None:
        assert hsv_to_rgb(0.125, 0.5, 0.5) == (127, 111, 63)
        assert hsv_to_rgb(0.625, 0.5, 0.75) == (95, 119, 191)
        assert HSV(0.625, 0.5, 0.75).render() == "#5F77BF"

    def test_channels_truncate(self) -> None:
        assert hsv_to_rgb(0.0, 0.0, 0.5) == (127, 127, 127)

    def test_rgb_property(self) -> None:
        assert HSV(0.5, 1.0, 1.0).rgb == RGB(0, 255, 255)

    @pytest.mark.parametrize("components", [(1.1, 0, 0), (0, -0.1, 0), (0, 0, 2)])
    def test_out_of_range(self, components: tuple) -> None:
        with pytest.raises(ValueError):
            HSV(*components)


class TestNamedColor:
    def test_lookup(self) -> None:
        assert x11_color("Red") == RGB(255, 0, 0)
        assert x11_color("navy").render() == "#000080"

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            x11_color("not-a-color")
        with pytest.raises(ValueError):
            NamedColor("not-a-color")

    def test_renders_lower_case_name(self) -> None:
        color = NamedColor("Blue")
        assert color.render() == "blue"
        assert color.rgb == RGB(0, 0, 255)

    def test_table_names_are_lower_case(self) -> None:
        assert all(name == name.lower() for name in X11_COLORS)


class TestColorList:
    def test_weighted(self) -> None:
        colors = ColorList()
        colors.add(RGB(255, 0, 0), 0.5)
        colors.add(RGB(0, 0, 255), 0.5)
        assert colors.render() == "#FF0000;0.50:#0000FF;0.50"

    def test_unweighted(self) -> None:
        colors = ColorList()
        colors.add(NamedColor("red"))
        colors.add(NamedColor("blue"))
        assert colors.render() == "red:blue"

    def test_weight_sum_limit(self) -> None:
        colors = ColorList()
        colors.add(RGB(255, 0, 0), 0.5)
        with pytest.raises(ValueError):
            colors.add(RGB(0, 0, 255), 0.6)
        assert len(colors.entries) == 1
        assert colors.weight_sum == 0.5

    def test_weight_range(self) -> None:
        with pytest.raises(ValueError):
            ColorList().add(RGB(0, 0, 0), 1.5)

    def test_rejects_nested_lists(self) -> None:
        with pytest.raises(ValueError):
            ColorList().add(ColorList())

    def test_render_is_repeatable(self) -> None:
        colors = ColorList()
        colors.add(RGB(0, 0, 0), 0.25)
        assert colors.render() == colors.render() == "#000000;0.25"
