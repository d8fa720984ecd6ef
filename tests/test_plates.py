import random

from planetgen.plates import generate_plates, partition_plates, plate_sizes


def _lattice():
    cells, coords = [], []
    for lat in range(-80, 81, 20):
        for lon in range(-170, 171, 20):
            cells.append(f"c{lat:+04d}{lon:+05d}")
            coords.append((float(lat), float(lon)))
    return cells, coords


def test_plate_count_and_elevation_ranges():
    cells, _ = _lattice()
    for seed in range(40):
        plates = generate_plates(cells, random.Random(seed))
        assert 8 <= len(plates) <= 12
        for p in plates:
            assert p.center in cells
            assert 0.1 <= p.base_elevation <= 0.9


def test_every_cell_gets_a_plate():
    cells, coords = _lattice()
    plate_map = partition_plates(cells, coords, random.Random(3))
    assert set(plate_map) == set(cells)
    assert sum(n for _, n in plate_sizes(plate_map)) == len(cells)
    # each center lies on its own plate
    for cell, plate in plate_map.items():
        assert plate_map[plate.center].center == plate.center


def test_assignment_uses_nearest_planar_center():
    cells, coords = _lattice()
    pos = dict(zip(cells, coords))
    plates = generate_plates(cells, random.Random(11))
    plate_map = partition_plates(cells, coords, random.Random(11))

    for cell, (lat, lon) in pos.items():
        d2 = [(lat - pos[p.center][0]) ** 2 + (lon - pos[p.center][1]) ** 2 for p in plates]
        best = d2.index(min(d2))
        assert plate_map[cell] == plates[best]


def test_partition_is_deterministic_per_seed():
    cells, coords = _lattice()
    a = partition_plates(cells, coords, random.Random(99))
    b = partition_plates(cells, coords, random.Random(99))
    assert [(a[c].center, a[c].base_elevation) for c in cells] == \
           [(b[c].center, b[c].base_elevation) for c in cells]


def test_empty_input():
    assert partition_plates([], [], random.Random(0)) == {}
