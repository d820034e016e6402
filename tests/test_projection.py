import pytest

from hockeysim.projection import (
    DevelopmentCurve,
    DevelopmentProfile,
    DraftProjection,
    ProjMax,
    Projection,
    ProjectionGenerationSettings,
    clamp_unit,
    growth_window_for_curve,
    scale_to_range,
)


@pytest.mark.parametrize(
    "quality, expected",
    [
        (0.0, ProjMax.MINOR),
        (0.5, ProjMax.TOP2),
        (0.95, ProjMax.GENERATIONAL),
        (1.0, ProjMax.GENERATIONAL),
        (-3.0, ProjMax.MINOR),
        (7.0, ProjMax.GENERATIONAL),
    ],
)
def test_proj_max_from_quality(quality, expected):
    assert ProjMax.from_quality(quality) is expected


def test_proj_max_is_monotonic():
    order = list(ProjMax)
    tiers = [order.index(ProjMax.from_quality(q / 100)) for q in range(101)]
    assert tiers == sorted(tiers)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0.9, 0.9, 0.8), DevelopmentCurve.BOOM_BUST),
        ((0.72, 0.6, 0.1), DevelopmentCurve.EARLY),
        ((0.35, 0.45, 0.1), DevelopmentCurve.LATE),
        ((0.5, 0.5, 0.5), DevelopmentCurve.LINEAR),
        ((0.72, 0.59, 0.1), DevelopmentCurve.LINEAR),
    ],
)
def test_curve_from_profile(args, expected):
    assert DevelopmentCurve.from_profile(*args) is expected


@pytest.mark.parametrize(
    "curve, window",
    [
        (DevelopmentCurve.EARLY, (18, 23)),
        (DevelopmentCurve.LINEAR, (18, 27)),
        (DevelopmentCurve.LATE, (20, 29)),
        (DevelopmentCurve.BOOM_BUST, (18, 26)),
    ],
)
def test_growth_window_for_curve(curve, window):
    assert growth_window_for_curve(curve) == window


def test_clamp_unit():
    assert clamp_unit(-0.5) == 0.0
    assert clamp_unit(0.25) == 0.25
    assert clamp_unit(2.0) == 1.0


def test_scale_to_range_endpoints_and_clamp():
    assert scale_to_range(0.0, 1, 7) == 1
    assert scale_to_range(1.0, 1, 7) == 7
    assert scale_to_range(5.0, 35, 99) == 99
    assert scale_to_range(-1.0, 20, 99) == 20


def test_scale_to_range_rounds_half_up():
    assert scale_to_range(0.5, 0, 1) == 1
    assert scale_to_range(0.5, 1, 7) == 4


def test_settings_are_clamped():
    settings = ProjectionGenerationSettings(-1.0, 2.0, 0.5, 0.3, 1.5, -0.2, 0.9)
    assert settings.actualization == 0.0
    assert settings.certainty == 1.0
    assert settings.visibility == 0.5
    assert settings.injury_risk == 1.0
    assert settings.coachability == 0.0


def test_default_balanced():
    settings = ProjectionGenerationSettings.default_balanced()
    assert settings.actualization == 0.55
    assert settings.volatility == 0.35
    assert settings.injury_risk == 0.3


def test_projection_holds_parts():
    draft = DraftProjection(1, 5, 80, 60, ProjMax.ELITE)
    profile = DevelopmentProfile(90, 50, 70, 65, 60, 55, 20, 18, 23, DevelopmentCurve.EARLY)
    projection = Projection(draft, profile)
    assert projection.draft_projection.max_projection is ProjMax.ELITE
    assert projection.development_profile.growth_window_end == 23