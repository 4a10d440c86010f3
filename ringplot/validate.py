from typing import Optional, Sequence

from .arcs import ArcOfer
from .errors import InvalidRangeError
from .features import Feature


def validate_radii(inner: float, outer: float) -> None:
    if inner > outer:
        raise InvalidRangeError(f"inner radius {inner!r} greater than outer radius {outer!r}")
    if inner < 0:
        raise InvalidRangeError(f"negative inner radius {inner!r}")


def validate_feature(feature: Feature) -> None:
    if feature.end < feature.start:
        raise InvalidRangeError(f"inverted feature: {feature!r}")
    child: Feature = feature
    loc: Optional[Feature] = feature.location
    while loc is not None:
        if child.start < loc.start or child.end > loc.end:
            raise InvalidRangeError(
                f"feature {child!r} out of range of its location "
                f"[{loc.start!r}, {loc.end!r}]"
            )
        child, loc = loc, loc.location


def validate_features(features: Sequence[Feature], base: Optional[ArcOfer] = None) -> None:
    """Check that every feature is well formed and, given ``base``, has an arc.

    Errors from ``base.arc_of`` propagate unchanged.
    """

    for feature in features:
        validate_feature(feature)
        if base is not None:
            base.arc_of(feature, None)


def resolves_all(base: ArcOfer, features: Sequence[Feature]) -> bool:
    """Return ``True`` when ``base`` can report an arc for every feature."""

    for feature in features:
        try:
            base.arc_of(feature, None)
        except LookupError:
            return False
    return True
