"""Tests for render plan serialization."""

from image_service.services.colors import Color
from image_service.services.gradients import GradientSpan, GradientStop, map_stops
from image_service.services.svg import (
    AsymmetricRoundedRect,
    BoxGradient,
    Circle,
    Disc,
    GradientDef,
    Line,
    Paint,
    Path,
    Rect,
    RenderPlan,
    RoundedRect,
    Text,
    num,
    render_primitive,
    to_svg,
)

from conftest import BLUE, PURPLE

SOLID = Paint.solid(BLUE)


class TestNum:
    def test_trims_trailing_zeros(self):
        assert num(20.0) == "20"
        assert num(37.5) == "37.5"
        assert num(1 / 3) == "0.33"

    def test_negative_zero(self):
        assert num(-0.0001) == "0"


class TestAsymmetricPath:
    def test_left_only_skips_right_arcs(self):
        d = AsymmetricRoundedRect(20, 25, 345, 75, 37.5, 0, SOLID).path()
        assert d.startswith("M 57.5 25 H 365 V 100 H 57.5")
        assert d.count(" A ") == 2
        assert d.endswith("Z")

    def test_right_only_skips_left_arcs(self):
        d = AsymmetricRoundedRect(0, 0, 100, 20, 0, 10, SOLID).path()
        assert d.count(" A ") == 2
        assert "A 10 10 0 0 1 100 10" in d
        assert d.endswith("H 0 V 0 Z")

    def test_no_zero_length_vertical_edge_for_capsule_ends(self):
        d = AsymmetricRoundedRect(0, 0, 100, 20, 10, 0, SOLID).path()
        assert "V 10" not in d


class TestPaint:
    def test_solid_opaque(self):
        assert SOLID.attrs() == 'fill="#3b82f6"'

    def test_solid_with_alpha(self):
        assert Paint.solid(Color(0, 0, 0, 0.5)).attrs("stroke") == (
            'stroke="#000000" stroke-opacity="0.5"'
        )

    def test_gradient_reference(self):
        assert Paint.gradient("g1").attrs() == 'fill="url(#g1)"'


class TestToSvg:
    def test_layer_order(self):
        mapping = map_stops([BLUE, PURPLE], GradientSpan.FULL_TRACK, 0, 100, 50)
        plan = RenderPlan(
            width=100, height=20,
            background=(Rect(0, 0, 100, 20, Paint.solid(Color(1, 1, 1))),),
            fill=(Rect(0, 0, 50, 20, Paint.gradient("g")),),
            gradients=(GradientDef("g", mapping, 10),),
            overlay=(Text(50, 10, "50%", 12, SOLID),),
        )
        svg = to_svg(plan)
        assert svg.startswith('<svg width="100" height="20"')
        assert svg.index("#010101") < svg.index("url(#g)") < svg.index("<defs>") < svg.index("<text")
        assert 'gradientUnits="userSpaceOnUse"' in svg
        assert '<stop offset="100%" stop-color="#8b5cf6"/>' in svg
        assert svg.endswith("</svg>")

    def test_text_is_escaped(self):
        out = render_primitive(Text(0, 0, "<b>&", 10, SOLID))
        assert "&lt;b&gt;&amp;" in out

    def test_circle_has_no_linecap(self):
        out = render_primitive(Circle(10, 10, 5, SOLID, 2))
        assert "stroke-linecap" not in out
        assert 'fill="none"' in out

    def test_filled_circle(self):
        out = render_primitive(Circle(10, 10, 5, SOLID, 2, fill=Paint.solid(Color(255, 255, 255))))
        assert 'fill="#ffffff"' in out
        assert 'stroke="#3b82f6"' in out


class TestPrimitives:
    def test_outlined_rounded_rect(self):
        out = render_primitive(RoundedRect(1, 1, 10, 10, 2, SOLID, stroke=SOLID, stroke_width=1.5))
        assert out.endswith('fill="#3b82f6" stroke="#3b82f6" stroke-width="1.5"/>')

    def test_rounded_rect_without_outline(self):
        assert "stroke" not in render_primitive(RoundedRect(0, 0, 10, 10, 2, SOLID))

    def test_disc(self):
        assert render_primitive(Disc(5, 6, 1.25, SOLID)) == (
            '<circle cx="5" cy="6" r="1.25" fill="#3b82f6"/>'
        )

    def test_line_has_round_caps(self):
        out = render_primitive(Line(0, 0, 3, 4, SOLID, 2))
        assert out.startswith('<line x1="0" y1="0" x2="3" y2="4"')
        assert 'stroke-linecap="round"' in out

    def test_path(self):
        assert render_primitive(Path("M 0 0 L 1 1 Z", SOLID)) == (
            '<path d="M 0 0 L 1 1 Z" fill="#3b82f6"/>'
        )

    def test_box_gradient_uses_percentages(self):
        stops = (GradientStop(0, BLUE), GradientStop(100, Color(0, 0, 0, 0.25)))
        plan = RenderPlan(
            width=10, height=10,
            background=(Rect(0, 0, 10, 10, Paint.gradient("box")),),
            gradients=(BoxGradient("box", stops, 0, 0, 100, 0),),
        )
        svg = to_svg(plan)
        assert '<linearGradient id="box" x1="0%" y1="0%" x2="100%" y2="0%">' in svg
        assert "gradientUnits" not in svg
        assert '<stop offset="100%" stop-color="#000000" stop-opacity="0.25"/>' in svg
