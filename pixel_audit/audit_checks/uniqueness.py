"""
Color uniqueness: each color belongs to exactly one artist.

The first artist to use a color in log order claims it. Every later event
by another artist with that color is an offense; offenses are grouped per
(color, offender) so one violation lists all of that artist's lines.
"""

from audit_core.occupancy import CanvasModel
from audit_core.types import ArtistId, AuditConfig, CheckResult, Color, Violation

UNIQUE_COLORS = "unique_colors"


def find_color_reuse(model: CanvasModel) -> dict[tuple[Color, ArtistId], tuple[ArtistId, list[int]]]:
    """
    Walk the canvas once in log order.

    Returns:
        (color, offender) -> (claimant, offending line numbers), in order of
        first offense
    """
    claims: dict[Color, ArtistId] = {}
    offenses: dict[tuple[Color, ArtistId], tuple[ArtistId, list[int]]] = {}

    for event in model.canvas:
        claimant = claims.setdefault(event.color, event.artist)
        if claimant == event.artist:
            continue
        key = (event.color, event.artist)
        if key not in offenses:
            offenses[key] = (claimant, [])
        offenses[key][1].append(event.line_number)

    return offenses


def check_colors_unique(model: CanvasModel, config: AuditConfig) -> CheckResult:
    announcement = "Verifying that all artists use unique colors..."

    violations = []
    for (color, offender), (claimant, lines) in find_color_reuse(model).items():
        violations.append(Violation(
            check=UNIQUE_COLORS,
            kind="color_reused",
            message=(
                f"Artist {offender} uses color {color}, which is also used by "
                f"artist {claimant} ({len(lines)} events)"
            ),
            artists=(claimant, offender),
            colors=(color,),
            lines=tuple(lines),
        ))

    return CheckResult(UNIQUE_COLORS, announcement, tuple(violations))
