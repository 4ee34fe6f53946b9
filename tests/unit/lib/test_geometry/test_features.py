"""Unit tests for feature identifiers, names, slugs and distances."""

import pytest

from spectra_atlas.lib.geometry import feature_identifier, feature_name, haversine_km, planar_distance, slugify


class TestFeatureIdentifier:
    """Tests for feature_identifier()."""

    def test_precedence(self) -> None:
        feature = {"properties": {"shapeName": "Pune", "id": 7, "shapeID": "IND-1"}}
        assert feature_identifier(feature) == "IND-1"

    def test_falls_through_missing_keys(self) -> None:
        assert feature_identifier({"properties": {"shapeID": None, "shapeName": "Pune"}}) == "Pune"
        assert feature_identifier({"properties": {"SHAPEID": "X"}}) == "X"

    def test_none_when_absent(self) -> None:
        assert feature_identifier({"properties": {}}) is None
        assert feature_identifier({"properties": None}) is None
        assert feature_identifier({}) is None

    def test_non_object_properties(self) -> None:
        assert feature_identifier({"properties": ["x"]}) is None
        assert feature_identifier({"properties": "shapeID"}) is None
        assert feature_identifier("feature") is None


class TestFeatureName:
    """Tests for feature_name()."""

    def test_name_keys(self) -> None:
        assert feature_name({"properties": {"NAME": "Kerala"}}) == "Kerala"
        assert feature_name({"properties": {"state": "Goa"}}) == "Goa"

    def test_default(self) -> None:
        assert feature_name({"properties": {}}) == "unknown"
        assert feature_name({"properties": ["Goa"]}) == "unknown"


class TestSlugify:
    """Tests for slugify()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Maharashtra", "maharashtra"),
            ("Andaman & Nicobar Islands", "andaman-nicobar-islands"),
            ("  Jammu and Kashmir ", "jammu-and-kashmir"),
            ("Dadra--Nagar Haveli!", "dadra-nagar-haveli"),
        ],
    )
    def test_slugs(self, name: str, expected: str) -> None:
        assert slugify(name) == expected


class TestDistances:
    """Tests for planar and haversine distances."""

    def test_planar(self) -> None:
        assert planar_distance((0, 0), (3, 4)) == 5.0

    def test_haversine_zero(self) -> None:
        assert haversine_km((77.0, 28.0), (77.0, 28.0)) == 0.0

    def test_haversine_one_degree_latitude(self) -> None:
        assert haversine_km((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111.19, rel=1e-3)
