"""
Tests for the airport row dispatcher.
"""

import pytest
from xplane_apt.models.enums import AirportType, FrequencyType
from xplane_apt.models.path import CoordLineType, ParsedPath
from xplane_apt.models.sign import SignColorMode
from xplane_apt.parsers.airport_parser import AirportParser, parse_airport, split_linear_features
from xplane_apt.parsers.sign_text import decode_airport_signs

HEADER = "1 433 0 0 KTST Test Field\n"
RUNWAY = (
    "100 45.00 1 201 0.25 1 2 1 "
    "09L 40.00000000 -75.00000000 0.00 0.00 3 8 1 0 "
    "27R 40.00000000 -74.97000000 150.00 60.00 3 0 0 1\n"
)


def make_path(types):
    coordinates = [(float(i), 0.0) for i in range(len(types))]
    return ParsedPath(
        coordinates=coordinates,
        line_types=[CoordLineType(line, light) for line, light in types],
    )


class TestSplitLinearFeatures:
    """Test splitting paths into same-styled runs."""

    def test_one_feature_per_run(self):
        path = make_path([(1, 0), (1, 0), (2, 0), (2, 0), (2, 101), (2, 101)])
        features = split_linear_features('chain', [path])
        assert len(features) == 3
        assert [(f.painted_line_type, f.lighting_line_type) for f in features] == [(1, 0), (2, 0), (2, 101)]
        assert all(len(f.coordinates) >= 2 for f in features)
        assert all(f.name == 'chain' for f in features)

    def test_adjacent_features_share_boundary_vertex(self):
        path = make_path([(1, 0), (1, 0), (2, 0), (2, 0), (3, 0), (3, 0)])
        features = split_linear_features('chain', [path])
        for previous, following in zip(features, features[1:]):
            assert previous.coordinates[-1] == following.coordinates[0]
        assert features[0].coordinates == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]

    def test_single_vertex_tail_is_dropped(self):
        path = make_path([(1, 0), (1, 0), (1, 0), (2, 0)])
        features = split_linear_features('chain', [path])
        assert len(features) == 1
        assert features[0].coordinates == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)]

    def test_constant_type_is_one_feature(self):
        path = make_path([(20, 0)] * 4)
        features = split_linear_features('edge', [path])
        assert len(features) == 1
        assert len(features[0].coordinates) == 4

    def test_mismatched_line_types_are_skipped(self):
        path = make_path([(1, 0), (1, 0), (1, 0)])
        path.line_types.pop()
        assert split_linear_features('chain', [path]) == []

    def test_short_path_is_skipped(self):
        assert split_linear_features('chain', [make_path([(1, 0)])]) == []


class TestSampleAirport:
    """Test parsing of the sample apt.dat airport."""

    def test_header(self, sample_airport):
        assert sample_airport.id == 'KTST'
        assert sample_airport.name == 'Test Field'
        assert sample_airport.elevation == 433.0
        assert sample_airport.airport_type == AirportType.LAND

    def test_metadata(self, sample_airport):
        assert sample_airport.metadata['city'] == 'Testville'
        assert sample_airport.country == 'United States'
        assert sample_airport.iata_code == 'TST'
        assert sample_airport.transition_alt == 18000
        assert sample_airport.drive_on_left is False
        assert sample_airport.faa_code is None

    def test_runway(self, sample_airport):
        assert len(sample_airport.runways) == 1
        runway = sample_airport.runways[0]
        assert runway.name == '09L/27R'
        assert runway.width == 45.0
        assert runway.surface_type == 1
        assert runway.shoulder_width == 2
        assert runway.shoulder_surface_type == 1
        assert runway.centerline_lights is True
        assert runway.edge_lights is True
        assert runway.le.marking == 3
        assert runway.le.lighting == 8
        assert runway.le.tdz_lighting is True
        assert runway.he.dthr_length == 150.0
        assert runway.he.overrun_length == 60.0
        assert runway.he.reil == 1

    def test_pavement_with_hole(self, sample_airport):
        assert len(sample_airport.taxiways) == 1
        assert len(sample_airport.pavements) == 1
        pavement = sample_airport.pavements[0]
        assert pavement.name == 'Main apron'
        assert pavement.surface_type == 1
        assert pavement.smoothness == 0.25
        assert len(pavement.coordinates) == 5
        assert len(pavement.holes) == 1
        assert pavement.holes[0][0] == pavement.holes[0][-1]

    def test_pavement_edges(self, sample_airport):
        edges = [f for f in sample_airport.linear_features if f.name == 'Main apron edge']
        assert len(edges) == 1
        assert edges[0].painted_line_type == 3
        assert edges[0].lighting_line_type == 102
        assert edges[0].coordinates == [(-75.0010, 40.0010), (-74.9990, 40.0010), (-74.9990, 40.0030)]

    def test_free_chain(self, sample_airport):
        chain = [f for f in sample_airport.linear_features if f.name == 'Taxi centerline']
        assert [f.painted_line_type for f in chain] == [1, 2]
        assert chain[0].coordinates[-1] == chain[1].coordinates[0] == (-75.0030, 40.0025)

    def test_boundary(self, sample_airport):
        assert len(sample_airport.boundaries) == 1
        boundary = sample_airport.boundaries[0]
        assert boundary.name == 'Airport boundary'
        assert len(boundary.paths) == 1
        assert boundary.paths[0].is_closed
        assert boundary.paths[0].is_hole is False

    def test_point_features(self, sample_airport):
        assert sample_airport.tower_location.height == 30.0
        assert sample_airport.tower_location.name == 'Tower'
        assert sample_airport.beacon.type == 1
        assert [w.illuminated for w in sample_airport.windsocks] == [True, False]
        assert len(sample_airport.helipads) == 1
        assert sample_airport.helipads[0].name == 'H1'
        assert sample_airport.helipads[0].width == 20.0

    def test_signs(self, sample_airport):
        assert len(sample_airport.signs) == 2
        first, second = sample_airport.signs
        assert first.text == '{@L}B6{@Y}C2{^r}'
        assert first.size == 2
        assert first.heading == 90.0
        # out of range headings are reset
        assert second.heading == 0.0

    def test_decoded_signs(self, sample_airport):
        decoded = decode_airport_signs(sample_airport)
        _, sign = decoded[1]
        assert sign.front[0].color_mode == SignColorMode.MANDATORY
        assert sign.back[0].text == 'A'

    def test_frequencies(self, sample_airport):
        frequencies = sample_airport.frequencies
        assert [f.type for f in frequencies] == [FrequencyType.AWOS, FrequencyType.GROUND, FrequencyType.TOWER]
        assert frequencies[0].frequency == pytest.approx(128.0)
        assert frequencies[1].frequency == pytest.approx(121.9)
        assert frequencies[2].name == 'Test Tower'

    def test_startup_locations(self, sample_airport):
        gate, ramp = sample_airport.startup_locations
        assert gate.name == 'Gate A1'
        assert gate.location_type == 'gate'
        assert gate.airplane_types == 'jets|turboprops'
        assert gate.heading == 270.0
        assert ramp.name == 'Ramp 1'
        assert ramp.location_type == 'misc'

    def test_rows_after_end_of_file_are_ignored(self, sample_airport):
        assert all(w.name != 'after end of file' for w in sample_airport.windsocks)

    def test_errors_and_stats(self, sample_result):
        assert len(sample_result.errors) == 2
        assert sample_result.stats.skipped == 2
        assert sample_result.stats.parsed == sample_result.data.feature_count() == 14
        assert sample_result.stats.time_ms is not None
        assert not sample_result.is_clean


class TestRowHandling:
    """Test individual row handling."""

    def test_short_runway_is_skipped(self):
        short = "100 30.00 1 0 0.25 0 0 0 18 40.0 -75.0 0 0 1 0 0 0 36 40.01 -75.0\n"
        assert len(short.split()) == 20
        result = AirportParser(HEADER + short).parse()
        assert result.data.runways == []
        assert len(result.errors) == 1

    def test_runway_with_invalid_end_is_skipped(self):
        bad = RUNWAY.replace('-74.97000000', 'xyz')
        result = AirportParser(HEADER + bad).parse()
        assert result.data.runways == []
        assert result.stats.skipped == 1

    def test_shoulder_without_width(self):
        row = RUNWAY.replace(' 201 ', ' 2 ', 1)
        runway = parse_airport(HEADER + row).runways[0]
        assert runway.shoulder_surface_type == 2
        assert runway.shoulder_width == 0

    def test_non_positive_runway_width_defaults(self):
        row = RUNWAY.replace('100 45.00', '100 0.00', 1)
        assert parse_airport(HEADER + row).runways[0].width == 30.0

    def test_seaplane_and_heliport_headers(self):
        assert parse_airport("16 0 0 0 KSEA Sea base").airport_type == AirportType.SEAPLANE
        assert parse_airport("17 0 0 0 KHEL Heliport").airport_type == AirportType.HELIPORT

    def test_unknown_rows_are_ignored(self):
        result = AirportParser(HEADER + "1050 122800 Tower\n9999 foo bar\nnot a row\n").parse()
        assert result.is_clean
        assert result.data.frequencies == []

    def test_node_row_outside_feature(self):
        result = AirportParser(HEADER + "111 40.0 -75.0\n").parse()
        assert result.stats.skipped == 1

    def test_taxiway_advances_cursor(self):
        text = HEADER + (
            "110 2 0.25 45.00 Apron\n"
            "111 40.0 -75.0\n"
            "111 40.0 -74.9\n"
            "115 40.1 -74.9\n"
            "19 40.0010 -74.9900 1 WS\n"
        )
        airport = parse_airport(text)
        assert len(airport.pavements) == 1
        assert airport.pavements[0].texture_orientation == 45.0
        assert len(airport.windsocks) == 1
        # no markings, no edge features
        assert airport.linear_features == []

    def test_bezier_resolution_is_passed_through(self):
        text = HEADER + (
            "120 Line\n"
            "111 40.0020 -75.0040 1 0\n"
            "112 40.0025 -75.0030 40.0030 -75.0035 1 0\n"
            "115 40.0020 -75.0020 1 0\n"
        )
        features = AirportParser(text, bezier_resolution=8).parse().data.linear_features
        assert len(features) == 1
        assert len(features[0].coordinates) == 17

    def test_parses_are_independent(self, sample_apt_text):
        first = parse_airport(sample_apt_text)
        second = parse_airport(sample_apt_text)
        first.runways.clear()
        first.metadata['city'] = 'Elsewhere'
        assert len(second.runways) == 1
        assert second.city == 'Testville'


class TestManyFeatures:
    """Test that consecutive features hand the cursor back correctly."""

    def make_pavements(self, count):
        rows = [HEADER]
        for n in range(count):
            lat = 40.0 + n * 0.001
            rows.append(f"110 1 0.25 0.00 Apron {n}\n")
            rows.append(f"111 {lat:.4f} -75.0000\n")
            rows.append(f"111 {lat:.4f} -74.9990\n")
            rows.append(f"111 {lat + 0.0005:.4f} -74.9990\n")
            rows.append(f"115 {lat + 0.0005:.4f} -75.0000\n")
        rows.append("19 40.0010 -74.9900 1 WS\n")
        return ''.join(rows)

    def test_many_pavements(self):
        count = 2000
        result = AirportParser(self.make_pavements(count), bezier_resolution=1).parse()
        airport = result.data
        assert result.is_clean
        assert len(airport.pavements) == count
        assert [p.name for p in airport.pavements[:3]] == ['Apron 0', 'Apron 1', 'Apron 2']
        assert airport.pavements[-1].name == f'Apron {count - 1}'
        assert all(len(p.coordinates) == 5 for p in airport.pavements)
        assert len(airport.windsocks) == 1
