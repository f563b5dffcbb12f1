import logging

import pytest

from meshroute.errors import InvalidParameterError, NoPathError, PointNotFoundError
from meshroute.models.domain import Graph, Point, Segment
from meshroute.schemas.routing import RouteRequest
from meshroute.services.mesh.parser import parse_mesh
from meshroute.services.routing import service as routing_service
from meshroute.services.routing.route_builder import route_distance
from meshroute.services.routing.service import calculate_cheapest_route, calculate_route

MESH = "A B 10\nB D 15\nA C 20\nC D 30\nB E 50\nD E 30\n"


def _graph(bidirectional: bool = False) -> Graph:
    return parse_mesh("sp", MESH, bidirectional=bidirectional)


@pytest.mark.parametrize("strategy", ["heap", "linear"])
def test_worked_example(strategy: str) -> None:
    result = calculate_cheapest_route(_graph(), "A", "D", 10, 2.50, strategy=strategy)

    assert result.route == ("A", "B", "D")
    assert result.distance_km == 25.0
    assert result.autonomy_km_per_l == 10
    assert result.fuel_price_per_l == 2.50
    assert result.cost == 6.25
    assert result.origin == "A"
    assert result.destination == "D"


@pytest.mark.parametrize("destination", ["B", "C", "D", "E"])
def test_reported_distance_matches_traversed_segments(destination: str) -> None:
    graph = _graph()

    result = calculate_cheapest_route(graph, "A", destination, 12, 3.1)

    assert route_distance(graph, result.route) == result.distance_km


def test_trivial_route() -> None:
    result = calculate_cheapest_route(_graph(), "E", "E", 10, 2.50)

    assert result.route == ("E",)
    assert result.distance_km == 0.0
    assert result.cost == 0.0


@pytest.mark.parametrize("origin, destination", [("Z", "D"), ("A", "Z")])
def test_unknown_point(origin: str, destination: str) -> None:
    with pytest.raises(PointNotFoundError) as excinfo:
        calculate_cheapest_route(_graph(), origin, destination, 10, 2.50)

    assert excinfo.value.name == "Z"


def test_unreachable_destination_one_way() -> None:
    with pytest.raises(NoPathError) as excinfo:
        calculate_cheapest_route(_graph(), "D", "A", 10, 2.50)

    assert (excinfo.value.origin, excinfo.value.destination) == ("D", "A")


def test_unreachable_isolated_point() -> None:
    graph = Graph(name="islands", points=(Point("A"), Point("B")))

    with pytest.raises(NoPathError):
        calculate_cheapest_route(graph, "A", "B", 10, 2.50)


def test_two_way_mesh_reaches_back() -> None:
    result = calculate_cheapest_route(_graph(bidirectional=True), "D", "A", 10, 2.50)

    assert result.route == ("D", "B", "A")
    assert result.distance_km == 25.0
    assert result.cost == 6.25


@pytest.mark.parametrize("autonomy, price", [(0, 2.5), (10, 0), (-1, 2.5), (10, -2.5)])
def test_invalid_vehicle_parameters_with_valid_path(autonomy: float, price: float) -> None:
    with pytest.raises(InvalidParameterError):
        calculate_cheapest_route(_graph(), "A", "D", autonomy, price)


def test_parameters_checked_before_search(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*args, **kwargs):
        raise AssertionError("search must not run")

    monkeypatch.setattr(routing_service, "find_shortest_paths", _fail)

    with pytest.raises(InvalidParameterError):
        calculate_cheapest_route(_graph(), "Z", "D", 0, 2.50)


def test_repeated_queries_are_identical() -> None:
    graph = _graph()

    results = {calculate_cheapest_route(graph, "A", "E", 9.3, 4.79) for _ in range(10)}

    assert len(results) == 1
    assert calculate_cheapest_route(graph, "A", "E", 9.3, 4.79, strategy="linear") in results


def test_calculate_route_from_request() -> None:
    payload = RouteRequest(origin=" A ", destination="D", autonomy_km_per_l=10, fuel_price_per_l=2.5)

    response = calculate_route(payload, _graph())

    assert response.mesh == "sp"
    assert response.route == ["A", "B", "D"]
    assert response.distance_km == 25.0
    assert response.cost == 6.25


def test_calculate_route_rejects_non_positive_autonomy() -> None:
    payload = RouteRequest(origin="A", destination="D", autonomy_km_per_l=0, fuel_price_per_l=2.5)

    with pytest.raises(InvalidParameterError):
        calculate_route(payload, _graph())


def test_queries_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="meshroute.services.routing.service")

    calculate_cheapest_route(_graph(), "A", "D", 10, 2.50)
    with pytest.raises(NoPathError):
        calculate_cheapest_route(_graph(), "E", "A", 10, 2.50)

    messages = [(record.levelname, record.getMessage()) for record in caplog.records]
    assert ("INFO", "Route A -> B -> D on mesh 'sp': 25.0 km, cost 6.25") in messages
    assert any(level == "WARNING" and "E -> A" in message for level, message in messages)


def test_long_segment_is_priced() -> None:
    graph = Graph.from_segments("big", [Segment("A", "B", 1e27)])

    result = calculate_cheapest_route(graph, "A", "B", 1, 1)

    assert result.distance_km == 1e27
    assert result.cost == 1e27


def test_cost_overflow_surfaces_as_invalid_parameter() -> None:
    graph = Graph.from_segments("big", [Segment("A", "B", 1e308)])

    with pytest.raises(InvalidParameterError):
        calculate_cheapest_route(graph, "A", "B", 0.5, 1)
