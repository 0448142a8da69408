from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

from src.domain.models import Itinerary, LineChange, RideSegment, StationGraph

_TEMPLATES: dict[str, dict[str, str]] = {
    "fa": {
        "title": "مسیر پیشنهادی از {source} به {destination} ({count} ایستگاه)",
        "same": "مبدأ و مقصد یکسان است: {station}",
        "ride": "خط {line}: {origin} به {destination}",
        "change": "تغییر خط در {station}: از خط {from_line} به خط {to_line} (+ ~{minutes} دقیقه)",
        "total": "زمان تقریبی سفر: ~{minutes} دقیقه",
        "share": "مسیر مترو از {source} به {destination}",
    },
    "en": {
        "title": "Route from {source} to {destination} ({count} stations)",
        "same": "Origin and destination are the same: {station}",
        "ride": "Line {line}: {origin} to {destination}",
        "change": "Change at {station}: line {from_line} to line {to_line} (+ ~{minutes} min)",
        "total": "Estimated travel time: ~{minutes} min",
        "share": "Metro route from {source} to {destination}",
    },
}
_FALLBACK_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class RouteSummary:
    title: str
    steps: tuple[str, ...]
    total_minutes: int

    @property
    def text(self) -> str:
        return "\n".join((self.title, *self.steps))


def _templates(locale: str | None, graph: StationGraph) -> dict[str, str]:
    # Same preference order as station names, so a route reads in one language.
    for candidate in (locale, *graph.locale_chain):
        if candidate in _TEMPLATES:
            return _TEMPLATES[candidate]
    return _TEMPLATES[_FALLBACK_LOCALE]


def describe(
    itinerary: Itinerary,
    graph: StationGraph,
    locale: str | None = None,
) -> RouteSummary:
    """Station-by-station description of an itinerary."""

    t = _templates(locale, graph)

    def name(key: str) -> str:
        return graph.display_name(key, locale)

    if not itinerary.events:
        title = t["same"].format(station=name(itinerary.source))
        return RouteSummary(title=title, steps=(), total_minutes=0)

    steps: list[str] = []
    for event in itinerary.events:
        if isinstance(event, LineChange):
            steps.append(
                t["change"].format(
                    station=name(event.at_station),
                    from_line=event.from_line,
                    to_line=event.to_line,
                    minutes=event.minutes,
                )
            )
        elif isinstance(event, RideSegment):
            steps.append(
                t["ride"].format(
                    line=event.line,
                    origin=name(event.from_station),
                    destination=name(event.to_station),
                )
            )
    steps.append(t["total"].format(minutes=itinerary.total_minutes))

    title = t["title"].format(
        source=name(itinerary.source),
        destination=name(itinerary.destination),
        count=itinerary.station_count,
    )
    return RouteSummary(
        title=title, steps=tuple(steps), total_minutes=itinerary.total_minutes
    )


def share_query(itinerary: Itinerary) -> str:
    """Query string that reopens the same route."""

    return urlencode(
        {"source": itinerary.source, "destination": itinerary.destination}
    )


def share_text(
    itinerary: Itinerary,
    graph: StationGraph,
    locale: str | None = None,
    *,
    base_url: str = "",
) -> str:
    t = _templates(locale, graph)
    headline = t["share"].format(
        source=graph.display_name(itinerary.source, locale),
        destination=graph.display_name(itinerary.destination, locale),
    )
    link = f"{base_url}?{share_query(itinerary)}"
    return f"{headline}\n{t['total'].format(minutes=itinerary.total_minutes)}\n{link}"
