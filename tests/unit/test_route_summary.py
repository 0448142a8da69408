from __future__ import annotations

from urllib.parse import parse_qs

from src.app.services.route_summary import describe, share_query, share_text
from src.domain.algorithms import build_itinerary
from src.domain.models import StationGraph


def _graph() -> StationGraph:
    return StationGraph.build(
        {
            "Tajrish": {
                "translations": {"fa": "تجریش", "en": "Tajrish"},
                "lines": [1],
                "relations": ["Darvazeh Dowlat"],
            },
            "Darvazeh Dowlat": {
                "translations": {"fa": "دروازه دولت", "en": "Darvazeh Dowlat"},
                "lines": [1, 4],
                "relations": ["Tajrish", "Ferdowsi"],
            },
            "Ferdowsi": {
                "translations": {"en": "Ferdowsi"},
                "lines": [4],
                "relations": ["Darvazeh Dowlat"],
            },
        }
    )


def test_describe_in_english() -> None:
    graph = _graph()
    itinerary = build_itinerary(graph, ("Tajrish", "Darvazeh Dowlat", "Ferdowsi"))

    summary = describe(itinerary, graph, "en")

    assert summary.title == "Route from Tajrish to Ferdowsi (3 stations)"
    assert summary.steps == (
        "Line 1: Tajrish to Darvazeh Dowlat",
        "Change at Darvazeh Dowlat: line 1 to line 4 (+ ~5 min)",
        "Line 4: Darvazeh Dowlat to Ferdowsi",
        "Estimated travel time: ~9 min",
    )
    assert summary.total_minutes == 9
    assert summary.text.splitlines()[0] == summary.title


def test_describe_uses_persian_names_and_templates_by_default_chain() -> None:
    graph = _graph()
    itinerary = build_itinerary(graph, ("Tajrish", "Darvazeh Dowlat"))

    summary = describe(itinerary, graph, "fa")

    assert "تجریش" in summary.title
    assert summary.steps[0] == "خط 1: تجریش به دروازه دولت"
    assert summary.steps[-1] == "زمان تقریبی سفر: ~2 دقیقه"


def test_describe_unknown_locale_follows_graph_locale_chain() -> None:
    graph = _graph()
    itinerary = build_itinerary(graph, ("Darvazeh Dowlat", "Ferdowsi"))

    summary = describe(itinerary, graph, "de")

    assert summary.steps[0] == "خط 4: دروازه دولت به Ferdowsi"


def test_describe_same_station() -> None:
    graph = _graph()
    itinerary = build_itinerary(graph, ("Ferdowsi",))

    summary = describe(itinerary, graph, "en")

    assert summary.title == "Origin and destination are the same: Ferdowsi"
    assert summary.steps == ()
    assert summary.total_minutes == 0


def test_describe_reads_line_change_time_from_itinerary() -> None:
    graph = _graph()
    itinerary = build_itinerary(
        graph,
        ("Tajrish", "Darvazeh Dowlat", "Ferdowsi"),
        time_per_line_change_min=7,
    )
    summary = describe(itinerary, graph, "en")
    assert "(+ ~7 min)" in summary.steps[1]
    assert summary.total_minutes == 11


def test_share_query_and_text() -> None:
    graph = _graph()
    itinerary = build_itinerary(graph, ("Tajrish", "Darvazeh Dowlat"))

    query = share_query(itinerary)
    assert parse_qs(query) == {
        "source": ["Tajrish"],
        "destination": ["Darvazeh Dowlat"],
    }

    text = share_text(itinerary, graph, "en", base_url="https://metro.example/")
    lines = text.splitlines()
    assert lines[0] == "Metro route from Tajrish to Darvazeh Dowlat"
    assert lines[1] == "Estimated travel time: ~2 min"
    assert lines[2] == f"https://metro.example/?{query}"


def test_describe_without_locale_uses_first_locale_of_chain() -> None:
    graph = StationGraph.build(
        {
            "A": {"translations": {"en": "Alpha"}, "lines": [1], "relations": ["B"]},
            "B": {"translations": {"en": "Bravo"}, "lines": [1], "relations": []},
        },
        locale_chain=("en",),
    )
    summary = describe(build_itinerary(graph, ("A", "B")), graph)
    assert summary.steps[0] == "Line 1: Alpha to Bravo"
