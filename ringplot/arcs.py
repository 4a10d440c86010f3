"""Arc model and the gapped radial layout of features around a base arc."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from .config import closed_tolerance
from .errors import ArcOverflowError, InvalidRangeError, NotFoundError
from .features import Feature, Orientation, feature_length, global_orientation
from .geometry import COMPLETE, Angle, normalize
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arc:
    """An angular span starting at ``theta`` with signed extent ``phi``."""

    theta: Angle
    phi: Angle

    def __post_init__(self) -> None:
        object.__setattr__(self, "theta", float(self.theta))
        object.__setattr__(self, "phi", float(self.phi))
        tolerance = closed_tolerance()
        if abs(self.phi) > COMPLETE + tolerance:
            raise InvalidRangeError(f"arc extent {self.phi!r} exceeds a complete turn")

    @property
    def end(self) -> Angle:
        return self.theta + self.phi

    @property
    def direction(self) -> float:
        return -1.0 if self.phi < 0 else 1.0

    def is_closed(self) -> bool:
        tolerance = closed_tolerance()
        return math.isclose(abs(self.phi), COMPLETE, rel_tol=0.0, abs_tol=tolerance)

    def arc(self) -> "Arc":
        return self


@runtime_checkable
class Arcer(Protocol):
    """Something occupying a single arc."""

    def arc(self) -> Arc:
        ...


@runtime_checkable
class ArcOfer(Arcer, Protocol):
    """Something able to report the arc of a located feature."""

    def arc_of(self, location: Optional[Feature], feature: Optional[Feature]) -> Arc:
        ...


def gap_count(n_features: int, closed: bool) -> int:
    """Number of gaps separating ``n_features`` on an open arc or closed ring."""

    if n_features == 0:
        return 0
    return n_features if closed else n_features - 1


class GappedArcs:
    """Lay out features along a base arc with a fixed angular gap between them.

    Features keep the order they are given in. Each receives an extent
    proportional to its length, and the extents plus the gaps fill the base
    arc exactly. A closed base ring carries one gap per feature; an open arc
    carries one fewer.
    """

    def __init__(self, base: Arcer, features: Sequence[Feature], gap: Angle) -> None:
        self.base = base.arc()
        self.features: Tuple[Feature, ...] = tuple(features)
        self.gap = float(gap)
        if self.gap < 0:
            raise InvalidRangeError(f"negative gap angle {gap!r}")

        self._arcs: Dict[int, Arc] = {}
        # Entries keep their location and feature alive so the id key stays unique.
        self._sub_arcs: Dict[Tuple[int, int], Tuple[Feature, Feature, Arc]] = {}
        self._layout()

    def _layout(self) -> None:
        if not self.features:
            logger.debug("Empty feature set, nothing to lay out")
            return

        lengths = np.array([feature_length(f) for f in self.features], dtype=float)
        inverted = np.flatnonzero(lengths < 0)
        if inverted.size:
            raise InvalidRangeError(f"inverted feature: {self.features[int(inverted[0])]!r}")

        closed = self.base.is_closed()
        gaps = gap_count(len(self.features), closed)
        span = abs(self.base.phi)
        budget = span - gaps * self.gap
        if budget < 0:
            if budget < -closed_tolerance() * COMPLETE:
                raise ArcOverflowError(
                    f"{gaps} gaps of {self.gap!r} rad exceed the base span of {span!r} rad"
                )
            budget = 0.0

        sign = self.base.direction
        total = float(lengths.sum())
        if total > 0:
            extents = lengths / total * budget * sign
        else:
            extents = np.zeros_like(lengths)

        # Starts depend on every previous extent: an ordered prefix sum.
        steps = extents[:-1] + self.gap * sign
        offsets = np.concatenate(([0.0], np.cumsum(steps)))
        starts = self.base.theta + offsets
        if closed:
            starts = np.array([normalize(s) for s in starts], dtype=float)

        for feature, start, extent in zip(self.features, starts.tolist(), extents.tolist()):
            self._arcs[id(feature)] = Arc(start, extent)

        logger.info(
            "Laid out %d feature(s) on a %s base: gaps=%d budget=%.6g rad",
            len(self.features),
            "closed" if closed else "open",
            gaps,
            budget,
        )

    def arc(self) -> Arc:
        return self.base

    def arcs(self) -> List[Tuple[Feature, Arc]]:
        """Return the laid out features and their arcs in layout order."""

        return [(f, self._arcs[id(f)]) for f in self.features]

    def __len__(self) -> int:
        return len(self.features)

    def __contains__(self, feature: object) -> bool:
        return id(feature) in self._arcs

    def arc_of(self, location: Optional[Feature], feature: Optional[Feature]) -> Arc:
        """Return the arc of ``feature`` within ``location``.

        A feature that was laid out itself always gets its own arc. With no
        location the feature must have been laid out. With no feature, or
        the location itself, the location's arc is returned.
        Locations that were not laid out are resolved through their own
        parent locations.
        """

        if feature is not None and id(feature) in self._arcs:
            return self._arcs[id(feature)]
        if location is None:
            if feature is None:
                raise NotFoundError("no location or feature given")
            return self._own_arc(feature)
        if feature is None or feature is location:
            return self._location_arc(location)

        key = (id(location), id(feature))
        cached = self._sub_arcs.get(key)
        if cached is not None and cached[0] is location and cached[1] is feature:
            return cached[2]
        arc = _sub_arc(self._location_arc(location), location, feature)
        self._sub_arcs[key] = (location, feature, arc)
        return arc

    def _own_arc(self, feature: Feature) -> Arc:
        arc = self._arcs.get(id(feature))
        if arc is None:
            raise NotFoundError(f"feature not found in layout: {feature!r}")
        return arc

    def _location_arc(self, location: Feature) -> Arc:
        arc = self._arcs.get(id(location))
        if arc is not None:
            return arc
        parent = location.location
        if parent is None:
            raise NotFoundError(f"location not found in layout: {location!r}")
        return self.arc_of(parent, location)


def _sub_arc(arc: Arc, location: Feature, feature: Feature) -> Arc:
    length = feature_length(location)
    scale = arc.phi / length if length else 0.0
    if global_orientation(location) == Orientation.REVERSE:
        offset = location.end - feature.end
    else:
        offset = feature.start - location.start
    return Arc(arc.theta + offset * scale, feature_length(feature) * scale)


apply_debug_logging(globals(), logger=logger, skip={"Arcer", "ArcOfer", "Arc"})


__all__ = [
    "Arc",
    "Arcer",
    "ArcOfer",
    "GappedArcs",
    "gap_count",
]
