"""
Unit tests for scheme generation.

- every role present and well formed, in both modes
- primary is the seed, error roles are fixed
- on* roles are black or white
- deterministic output
"""

import re

import pytest

from tonal_theme.codec import hex_to_rgb
from tonal_theme.contrast import relative_luminance
from tonal_theme.core_types import InvalidColorFormat
from tonal_theme.scheme import SCHEME_ROLES, generate_scheme_from_color, generate_scheme_pair

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")
SEEDS = ["#6750A4", "#006A6A", "#B3261E", "#808080", "#000000", "#FFFFFF", "#F9DD3B"]
ERROR_ROLES = {"error", "onError", "errorContainer", "onErrorContainer"}


def _lum(hex_colour: str) -> float:
    return relative_luminance(*hex_to_rgb(hex_colour))


class TestSchemeShape:
    """Role coverage and formatting"""

    def test_default_seed_light(self):
        scheme = generate_scheme_from_color("#6750A4", False)
        assert tuple(scheme) == SCHEME_ROLES
        assert len(scheme) == 28
        assert all(HEX_RE.match(v) for v in scheme.values())
        assert scheme["primary"] == "#6750A4"

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("is_dark", [False, True])
    def test_all_roles_well_formed(self, seed, is_dark):
        scheme = generate_scheme_from_color(seed, is_dark)
        assert set(scheme) == set(SCHEME_ROLES)
        assert all(HEX_RE.match(v) for v in scheme.values())

    def test_lowercase_seed_canonicalised(self):
        assert generate_scheme_from_color("6750a4")["primary"] == "#6750A4"

    def test_scheme_is_read_only(self):
        scheme = generate_scheme_from_color("#6750A4")
        with pytest.raises(TypeError):
            scheme["primary"] = "#000000"  # type: ignore[index]

    def test_invalid_seed(self):
        with pytest.raises(InvalidColorFormat):
            generate_scheme_from_color("#67504", False)


class TestSchemeRoles:
    """Role semantics"""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("is_dark", [False, True])
    def test_on_roles_are_black_or_white(self, seed, is_dark):
        scheme = generate_scheme_from_color(seed, is_dark)
        for role, value in scheme.items():
            if role.startswith("on") and role not in ERROR_ROLES:
                assert value in ("#000000", "#FFFFFF"), role

    def test_error_roles_fixed_per_mode(self):
        light = generate_scheme_from_color("#006A6A", False)
        dark = generate_scheme_from_color("#006A6A", True)
        assert light["error"] == "#BA1A1A"
        assert light["onErrorContainer"] == "#410002"
        assert dark["error"] == "#F2B8B5"
        assert dark["errorContainer"] == "#8C1D18"
        other = generate_scheme_from_color("#F9DD3B", False)
        assert {r: other[r] for r in ERROR_ROLES} == {r: light[r] for r in ERROR_ROLES}

    def test_surface_text(self):
        light = generate_scheme_from_color("#6750A4", False)
        dark = generate_scheme_from_color("#6750A4", True)
        assert light["onSurface"] == "#000000"
        assert dark["onSurface"] == "#FFFFFF"
        assert _lum(light["surface"]) > _lum(dark["surface"])

    def test_mode_tones(self):
        light = generate_scheme_from_color("#6750A4", False)
        dark = generate_scheme_from_color("#6750A4", True)
        assert _lum(light["secondary"]) > _lum(dark["secondary"])
        assert _lum(light["tertiary"]) > _lum(dark["tertiary"])
        assert _lum(light["primaryContainer"]) > _lum(light["primary"])
        assert _lum(dark["surfaceDim"]) <= _lum(dark["surface"]) <= _lum(dark["surfaceBright"])

    def test_primary_same_in_both_modes(self):
        pair = generate_scheme_pair("#6750A4")
        assert pair["light"]["primary"] == pair["dark"]["primary"] == "#6750A4"
        assert pair["light"]["surface"] != pair["dark"]["surface"]


def test_deterministic():
    a = generate_scheme_from_color("#6750A4", True)
    b = generate_scheme_from_color("#6750A4", True)
    assert dict(a) == dict(b)
    assert list(a.items()) == list(b.items())
