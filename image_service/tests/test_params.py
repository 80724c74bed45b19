"""Tests for query parameter parsing."""

import logging

import pytest

from image_service.services.bar import Section
from image_service.services.colors import Color
from image_service.services.errors import (
    InvalidColor,
    MalformedAspectRatio,
    MalformedMultiValue,
    OutOfRangeDimension,
    RenderValidationError,
)
from image_service.services.gradients import FillMode, GradientSpan
from image_service.services.params import (
    first_param,
    parse_aspect_ratio,
    parse_bar_request,
    parse_donut_request,
    parse_sections,
)

from conftest import BLUE, GREEN, PURPLE, RED


class TestFirstParam:
    def test_alias_order(self):
        assert first_param({"color": "#fff", "colors": "#000"}, "colors", "color") == "#000"

    def test_blank_values_are_skipped(self):
        assert first_param({"colors": "  ", "color": "#fff"}, "colors", "color") == "#fff"
        assert first_param({}, "colors") is None


class TestValue:
    @pytest.mark.parametrize("raw,expected", [
        ("75", 75), ("-20", 0), ("140", 100), ("abc", 50), ("", 50), ("nan", 50),
        ("1e999", 100), ("-inf", 0),
    ])
    def test_clamped_or_default(self, raw, expected):
        assert parse_bar_request({"value": raw}).value == expected

    def test_missing_defaults_to_fifty(self):
        assert parse_bar_request({}).value == 50


class TestColors:
    def test_defaults(self):
        req = parse_bar_request({})
        assert req.palette == (BLUE,)
        assert req.background == Color(0xE5, 0xE7, 0xEB)

    def test_colors_wins_over_color(self):
        req = parse_bar_request({"colors": "#3B82F6,#8B5CF6", "color": "#10B981"})
        assert req.palette == (BLUE, PURPLE)

    def test_single_color_alias(self):
        assert parse_bar_request({"color": "#10B981"}).palette == (GREEN,)

    def test_background_alias(self):
        assert parse_bar_request({"bgColor": "#FF0000"}).background == RED

    def test_invalid_color_names_param(self):
        with pytest.raises(InvalidColor) as exc:
            parse_bar_request({"bg": "grey"})
        assert exc.value.param == "bg"
        assert exc.value.to_dict()["error"] == "invalid_color"


class TestAspectRatio:
    @pytest.mark.parametrize("raw,expected", [("4", 4), ("2.5", 2.5), ("16:4", 4), ("3:2", 1.5)])
    def test_forms(self, raw, expected):
        assert parse_aspect_ratio(raw) == expected

    @pytest.mark.parametrize("raw", ["wide", "4:0", "0", "-2", "1:2:3"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedAspectRatio):
            parse_aspect_ratio(raw)

    def test_height_follows_ratio(self):
        assert parse_bar_request({"aspectRatio": "5:1"}).height == 100

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeDimension) as exc:
            parse_bar_request({"aspectRatio": "20"})
        assert exc.value.param == "aspectRatio"


class TestBarDimensions:
    @pytest.mark.parametrize("params,param", [
        ({"width": "50"}, "width"),
        ({"width": "5000"}, "width"),
        ({"padding": "150"}, "padding"),
        ({"segments": "60"}, "segments"),
        ({"gap": "-1"}, "gap"),
        ({"radius": "200"}, "radius"),
    ])
    def test_out_of_range(self, params, param):
        with pytest.raises(OutOfRangeDimension) as exc:
            parse_bar_request(params)
        assert exc.value.param == param
        assert exc.value.code == "out_of_range"

    def test_padding_must_leave_room(self):
        with pytest.raises(OutOfRangeDimension):
            parse_bar_request({"width": "150", "padding": "80"})

    def test_gap_must_leave_room_for_cells(self):
        with pytest.raises(OutOfRangeDimension) as exc:
            parse_bar_request({"width": "100", "padding": "0", "segments": "50", "gap": "3"})
        assert exc.value.param == "gap"

    def test_unparsable_dimension_uses_default(self):
        assert parse_bar_request({"width": "wide"}).width == 500

    def test_radius_tri_state(self):
        assert parse_bar_request({}).radius is None
        assert parse_bar_request({"radius": ""}).radius is None
        assert parse_bar_request({"radius": "0"}).radius == 0

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_bar_request({"width": "1"})
        assert issubclass(OutOfRangeDimension, RenderValidationError)


class TestOptions:
    def test_gradient_span(self):
        assert parse_bar_request({}).gradient_span is GradientSpan.FULL_TRACK
        assert parse_bar_request({"gradientSpan": "progress"}).gradient_span is GradientSpan.FILLED_REGION
        assert parse_bar_request({"gradientScope": "PROGRESS"}).gradient_span is GradientSpan.FILLED_REGION
        assert parse_bar_request({"gradientSpan": "sideways"}).gradient_span is GradientSpan.FULL_TRACK

    def test_fill_mode(self):
        assert parse_bar_request({}).fill_mode is FillMode.GRADIENT
        assert parse_bar_request({"fill": "solid"}).fill_mode is FillMode.SOLID

    def test_segments_truncate_to_int(self):
        assert parse_bar_request({"segments": "4.7"}).segments == 4


class TestSections:
    def test_plain_values(self):
        assert parse_sections("30,20,10") == (Section(30), Section(20), Section(10))

    def test_explicit_colors(self):
        assert parse_sections("30:#FF0000, 20") == (Section(30, RED), Section(20))

    def test_non_positive_dropped(self):
        assert parse_sections("-5,0,10") == (Section(10),)

    def test_empty_entries_ignored(self):
        assert parse_sections("10,,20,") == (Section(10), Section(20))

    @pytest.mark.parametrize("raw", ["abc", "10,x", "10:#nothex"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedMultiValue):
            parse_sections(raw)

    def test_blank_means_not_multi(self):
        req = parse_bar_request({"value": "60", "values": ""})
        assert req.sections is None
        assert req.mode == "single"
        assert req.value == 60
        assert parse_bar_request({"values": "   "}).mode == "single"

    def test_all_non_positive_still_multi(self):
        req = parse_bar_request({"values": "-5,0"})
        assert req.sections == ()
        assert req.mode == "multi"

    def test_absent_means_not_multi(self):
        req = parse_bar_request({})
        assert req.sections is None
        assert req.mode == "single"

    def test_present_means_multi(self):
        req = parse_bar_request({"values": "30,20"})
        assert req.mode == "multi"
        assert len(req.sections) == 2

    def test_malformed_degrades_to_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger="image_service.services.params"):
            req = parse_bar_request({"values": "abc"})
        assert req.sections == ()
        assert req.mode == "multi"
        assert "malformed values" in caplog.text


class TestDonutParams:
    def test_defaults(self):
        req = parse_donut_request({})
        assert (req.size, req.stroke_width, req.padding) == (200, 20, 10)

    @pytest.mark.parametrize("params,param", [
        ({"size": "10"}, "size"),
        ({"size": "900"}, "size"),
        ({"strokeWidth": "2"}, "strokeWidth"),
        ({"padding": "101"}, "padding"),
    ])
    def test_out_of_range(self, params, param):
        with pytest.raises(OutOfRangeDimension) as exc:
            parse_donut_request(params)
        assert exc.value.param == param

    def test_stroke_must_be_thinner_than_size(self):
        with pytest.raises(OutOfRangeDimension):
            parse_donut_request({"size": "50", "strokeWidth": "50"})
