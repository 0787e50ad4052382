import random

import pytest

from truckroutes.data.demo import DEMO_DEPOT, DEMO_STOPS
from truckroutes.models.domain import Depot, Stop
from truckroutes.services.geospatial import haversine_km, route_distance_km
from truckroutes.services.routing import RouteResult, rank_results, solve_cvrp
from truckroutes.services.routing.models import WorkingRoute


def _stop(sid: str, lat: float, lng: float, demand: float = 1) -> Stop:
    return Stop(id=sid, name=f"Stop {sid}", lat=lat, lng=lng, demand=demand)


def _random_stops(seed: int, count: int) -> list[Stop]:
    rng = random.Random(seed)
    return [
        _stop(f"S{index}", 18.79 + rng.uniform(-0.3, 0.3), 98.99 + rng.uniform(-0.3, 0.3), rng.randint(1, 4))
        for index in range(count)
    ]


def test_empty_input_gives_no_routes():
    assert solve_cvrp(Depot(name="D", lat=0, lng=0), [], capacity=10) == ()


def test_single_stop_round_trip():
    depot = Depot(name="D", lat=0, lng=0)
    stop = _stop("1", 0, 0.1, demand=2)

    (result,) = solve_cvrp(depot, [stop], capacity=10)

    assert result.route == (stop,)
    assert result.load == 2
    assert result.distance_km == pytest.approx(2 * haversine_km(depot, stop))


def test_capacity_forces_split():
    depot = Depot(name="D", lat=0, lng=0)
    stops = [_stop("1", 0, 0.1, 2), _stop("2", 0, 0.2, 2), _stop("3", 0, 0.3, 2)]

    results = solve_cvrp(depot, stops, capacity=4)

    assert len(results) >= 2
    assert all(result.load <= 4 for result in results)
    assert sorted(sid for result in results for sid in result.stop_ids) == ["1", "2", "3"]
    # The far pair saves the most and fills one truck; the near stop rides alone
    assert [result.stop_ids for result in results] == [["1"], ["2", "3"]]


def test_partition_load_and_capacity_on_random_instances():
    depot = Depot(name="D", lat=18.79, lng=98.99)
    for seed in range(5):
        stops = _random_stops(seed, 30)

        results = solve_cvrp(depot, stops, capacity=10)

        ids = [sid for result in results for sid in result.stop_ids]
        assert len(ids) == len(set(ids))
        assert set(ids) == {stop.id for stop in stops}
        for result in results:
            assert result.load == sum(stop.demand for stop in result.route)
            assert result.load <= 10
            assert result.distance_km == pytest.approx(route_distance_km(depot, result.route))
        assert sum(result.load for result in results) == sum(stop.demand for stop in stops)


def test_results_are_ranked_shortest_first():
    results = solve_cvrp(DEMO_DEPOT, _random_stops(3, 25), capacity=6)

    distances = [result.distance_km for result in results]
    assert distances == sorted(distances)


def test_solve_is_deterministic():
    stops = _random_stops(42, 40)

    first = solve_cvrp(DEMO_DEPOT, stops, capacity=8)
    second = solve_cvrp(DEMO_DEPOT, list(stops), capacity=8)

    assert first == second


def test_oversized_stop_is_kept_on_its_own_route(caplog):
    depot = Depot(name="D", lat=0, lng=0)
    stops = [_stop("big", 0, 0.1, demand=9), _stop("a", 0, 0.2, 1), _stop("b", 0, 0.3, 1)]

    with caplog.at_level("WARNING"):
        results = solve_cvrp(depot, stops, capacity=4)

    big_routes = [result for result in results if "big" in result.stop_ids]
    assert len(big_routes) == 1
    assert big_routes[0].stop_ids == ["big"]
    assert big_routes[0].load == 9
    assert all(result.load <= 4 for result in results if result is not big_routes[0])
    assert "exceed truck capacity" in caplog.text


def test_demo_plan_fits_capacity():
    results = solve_cvrp(DEMO_DEPOT, DEMO_STOPS, capacity=6)

    assert len(results) >= 2
    assert all(result.load <= 6 for result in results)
    assert sorted(sid for result in results for sid in result.stop_ids) == ["A", "B", "C", "D", "E"]


def test_unlimited_capacity_builds_one_route():
    stops = _random_stops(5, 12)

    results = solve_cvrp(DEMO_DEPOT, stops, capacity=1000)

    assert len(results) == 1
    assert results[0].load == sum(stop.demand for stop in stops)


def test_rank_results_measures_round_trips():
    depot = Depot(name="D", lat=0, lng=0)
    far = WorkingRoute(stops=[_stop("far", 0, 0.5)], load=1)
    near = WorkingRoute(stops=[_stop("near", 0, 0.1)], load=2)

    ranked = rank_results(depot, [far, near])

    assert [result.stop_ids for result in ranked] == [["near"], ["far"]]
    assert isinstance(ranked[0], RouteResult)
    assert ranked[0].load == 2
