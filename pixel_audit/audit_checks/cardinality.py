"""
Artist-count and minimum-pixel checks.

A shortfall in either is usually starvation or a spawn bug in the painting
program, not a problem with the log itself.
"""

from audit_core.occupancy import CanvasModel
from audit_core.types import ArtistId, AuditConfig, CheckResult, Violation

ARTIST_COUNT = "artist_count"
MINIMUM_PIXELS = "minimum_pixels"


def artists_with_pixels(model: CanvasModel) -> list[ArtistId]:
    """Artists that painted at least one point, ascending."""
    return [a for a in model.artists() if model.occupancy[a]]


def check_artist_count(model: CanvasModel, config: AuditConfig) -> CheckResult:
    """Distinct artist count must equal config.expected_artist_count."""
    announcement = f"Verifying that exactly {config.expected_artist_count} artists painted..."
    found = len(model.occupancy)

    violations = []
    if found != config.expected_artist_count:
        violations.append(Violation(
            check=ARTIST_COUNT,
            kind="artist_count",
            message=(
                f"Expected {config.expected_artist_count} artists, but found {found}; "
                f"incorrect number of artists painted!"
            ),
            artists=tuple(model.artists()),
        ))

    return CheckResult(ARTIST_COUNT, announcement, tuple(violations))


def check_minimum_pixels(model: CanvasModel, config: AuditConfig) -> CheckResult:
    """
    Every artist must paint at least config.minimum_pixels_per_artist points.

    Zero-pixel artists are always reported (kind "no_pixels"), even when the
    configured minimum is 0.
    """
    minimum = config.minimum_pixels_per_artist
    announcement = f"Verifying that all artists draw at least {minimum} pixels..."

    violations = []
    for artist in model.artists():
        count = model.pixel_count(artist)
        if count == 0:
            violations.append(Violation(
                check=MINIMUM_PIXELS,
                kind="no_pixels",
                message=f"Artist {artist} drew no pixels; should draw at least {max(minimum, 1)}.",
                artists=(artist,),
            ))
        elif count < minimum:
            violations.append(Violation(
                check=MINIMUM_PIXELS,
                kind="too_few_pixels",
                message=(
                    f"Artist {artist} drew {count} pixels; "
                    f"should draw at least {minimum} pixels."
                ),
                artists=(artist,),
            ))

    return CheckResult(MINIMUM_PIXELS, announcement, tuple(violations))
