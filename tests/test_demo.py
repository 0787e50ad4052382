from truckroutes.data.demo import DEMO_DEPOT, DEMO_STOPS, add_stop, random_stops


def test_random_stops_are_reproducible_with_seed():
    first = random_stops(DEMO_DEPOT, 8, seed=3)
    second = random_stops(DEMO_DEPOT, 8, seed=3)

    assert first == second
    assert [stop.id for stop in first] == list("ABCDEFGH")


def test_random_stops_stay_near_depot():
    stops = random_stops(DEMO_DEPOT, 20, spread=0.6, seed=1)

    for stop in stops:
        assert abs(stop.lat - DEMO_DEPOT.lat) <= 0.3
        assert abs(stop.lng - DEMO_DEPOT.lng) <= 0.3
        assert 1 <= stop.demand <= 4


def test_add_stop_appends_next_letter_with_unit_demand():
    stops = add_stop(DEMO_DEPOT, list(DEMO_STOPS), seed=0)

    assert len(stops) == len(DEMO_STOPS) + 1
    new_stop = stops[-1]
    assert new_stop.id == "F"
    assert new_stop.name == "Raw Spot F"
    assert new_stop.demand == 1
    assert abs(new_stop.lat - DEMO_DEPOT.lat) <= 0.1


def test_add_stop_skips_ids_already_taken():
    stops = add_stop(DEMO_DEPOT, list(DEMO_STOPS[1:]), seed=0)

    # Four stops remain (B-E), so "E" is next by count but already in use
    assert stops[-1].id == "F"
    assert len({stop.id for stop in stops}) == len(stops)


def test_add_stop_stays_within_a_tenth_of_a_degree():
    for seed in range(50):
        new_stop = add_stop(DEMO_DEPOT, [], seed=seed)[-1]

        assert abs(new_stop.lat - DEMO_DEPOT.lat) <= 0.1
        assert abs(new_stop.lng - DEMO_DEPOT.lng) <= 0.1
