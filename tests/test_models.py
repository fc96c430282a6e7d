import pytest
from pydantic import ValidationError

from patent_atlas.config import AtlasSettings
from patent_atlas.exceptions import PatentNotFoundError, TransportError
from patent_atlas.models.commands import CompareCommand, SearchCommand
from patent_atlas.models.patent import GeographicRegion, PatentRecord, PatentStatus, SearchCriteria
from patent_atlas.utils.normalizer import PatentNormalizer


class TestPatentRecord:
    """Test cases for patent record parsing."""

    def test_parses_service_json(self, sample_patents):
        record = sample_patents[0]

        assert record.patent_no == "TR2023/990011"
        assert record.geographic_region is GeographicRegion.TURKEY
        assert record.patent_status is PatentStatus.ACTIVE
        assert record.coordinates == (39.9334, 32.8597)

    def test_accepts_snake_case(self):
        record = PatentRecord(patent_no="A", geographic_region="EU")
        assert record.geographic_region is GeographicRegion.EU

    def test_patent_number_is_required(self):
        with pytest.raises(ValidationError):
            PatentRecord.model_validate({"keywords": "x"})
        with pytest.raises(ValidationError):
            PatentRecord.model_validate({"patentNo": ""})

    def test_blank_text_is_absent(self, make_patent):
        record = make_patent("A", keywords="  ", applicant="")

        assert record.keywords is None
        assert record.applicant is None

    def test_unknown_region_and_status(self, make_patent):
        record = make_patent("A", geographicRegion="MARS", patentStatus="pending")

        assert record.geographic_region is GeographicRegion.OTHER
        assert record.region_label == "MARS"
        assert record.patent_status is None

    def test_unrecognized_region_round_trips(self, make_patent):
        record = make_patent("A", geographicRegion="LATAM")

        assert record.to_api() == {"patentNo": "A", "geographicRegion": "LATAM"}
        assert PatentRecord.model_validate(record.to_api()) == record

    def test_status_is_case_insensitive(self, make_patent):
        assert make_patent("A", patentStatus="INACTIVE").patent_status is PatentStatus.INACTIVE

    @pytest.mark.parametrize("fields", [
        {},
        {"latitude": 39.0},
        {"latitude": 0, "longitude": 32.0},
        {"latitude": None, "longitude": 32.0},
    ])
    def test_incomplete_coordinates(self, make_patent, fields):
        record = make_patent("A", **fields)

        assert not record.has_coordinates
        assert record.coordinates is None

    def test_unknown_fields_are_ignored(self, make_patent):
        record = make_patent("A", _id="64f0c0ffee", createdAt="2024-01-01")
        assert record.to_api() == {"patentNo": "A"}

    def test_records_are_immutable(self, make_patent):
        record = make_patent("A")
        with pytest.raises(ValidationError):
            record.applicant = "Someone"

    def test_to_api_uses_service_names(self, make_patent):
        payload = make_patent("A", geographicRegion="USA", patentStatus="active").to_api()
        assert payload == {"patentNo": "A", "geographicRegion": "USA", "patentStatus": "active"}


class TestSearchCriteria:

    def test_empty(self):
        assert SearchCriteria().is_empty()
        assert SearchCriteria(keywords=" ", status="").is_empty()

    def test_query_params_use_service_names(self):
        criteria = SearchCriteria(patent_no="TR", region="TURKEY")

        assert not criteria.is_empty()
        assert criteria.to_query_params() == {"patentNo": "TR", "region": "TURKEY"}

    def test_search_command_defaults_to_no_criteria(self):
        assert SearchCommand().criteria.is_empty()


class TestCompareCommand:

    def test_blank_numbers_become_missing(self):
        command = CompareCommand(first_no="  TR2024/112233 ", second_no="   ")

        assert command.first_no == "TR2024/112233"
        assert command.second_no is None


class TestPatentNormalizer:

    @pytest.fixture
    def normalizer(self):
        return PatentNormalizer()

    def test_fold_applies_compatibility_forms(self, normalizer):
        assert normalizer.fold("ＡＢＣ") == "abc"
        assert normalizer.fold(None) == ""

    def test_keyword_terms(self, normalizer):
        assert normalizer.keyword_terms("AI, Health ,,ai") == {"ai", "health"}
        assert normalizer.keyword_terms(None) == set()

    def test_abstract_words(self, normalizer):
        assert normalizer.abstract_words("  A  quick\tfox\n") == ["a", "quick", "fox"]
        assert normalizer.abstract_words("   ") == []

    def test_primary_class(self, normalizer):
        assert normalizer.primary_class(" H04L 9/08") == "H04L"
        assert normalizer.primary_class("G06N") == "G06N"
        assert normalizer.primary_class("  ") is None

    def test_ipc_rollup(self, normalizer):
        assert normalizer.get_ipc_rollup("H04L 9/08") == "H - Electricity"
        assert normalizer.get_ipc_rollup("Z99") is None


class TestErrors:

    def test_not_found_lists_numbers(self):
        error = PatentNotFoundError("A", "B")

        assert error.patent_nos == ("A", "B")
        assert str(error) == "Patent not found: A, B"

    def test_transport_error_status(self):
        assert TransportError("down").status_code is None
        assert TransportError("missing", status_code=404).status_code == 404


class TestAtlasSettings:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "PATENT_ATLAS_API_URL", "PATENT_ATLAS_TIMEOUT", "PATENT_ATLAS_FIT_PADDING",
            "PATENT_ATLAS_MAX_FIT_ZOOM", "PATENT_ATLAS_DETAIL_ZOOM", "PATENT_ATLAS_ENVIRONMENT",
            "SENTRY_DSN",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = AtlasSettings.from_env(dotenv=False)

        assert settings.api_url == "http://localhost:3000/api"
        assert settings.request_timeout == 10.0
        assert settings.fit_padding == 50
        assert settings.max_fit_zoom == 12
        assert settings.detail_zoom == 8
        assert settings.sentry_dsn is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PATENT_ATLAS_API_URL", "https://patents.example/api")
        monkeypatch.setenv("PATENT_ATLAS_TIMEOUT", "2.5")
        monkeypatch.setenv("PATENT_ATLAS_DETAIL_ZOOM", "10")

        settings = AtlasSettings.from_env(dotenv=False)

        assert settings.api_url == "https://patents.example/api"
        assert settings.request_timeout == 2.5
        assert settings.detail_zoom == 10

    def test_invalid_timeout_is_rejected(self, monkeypatch):
        monkeypatch.setenv("PATENT_ATLAS_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            AtlasSettings.from_env(dotenv=False)


if __name__ == "__main__":
    pytest.main([__file__])
