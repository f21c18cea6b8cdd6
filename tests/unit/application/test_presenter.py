"""Unit tests for the record presenter."""

from __future__ import annotations

from expert_directory.application.search import (
    ExpertSummary,
    Location,
    display_name,
    present,
    present_all,
    primary_address,
    split_expertise,
)


def _record(**overrides: object) -> dict:
    record = {
        "id": 7,
        "uuid": "b7e1",
        "salutation": "Dr.",
        "first_name": "Ana",
        "middle_name": None,
        "last_name": "Ruiz",
        "professional_suffix": "PhD",
        "expert_area_of_expertise": [
            {"area_of_expertise": "Toxicology", "is_primary": False},
            {"area_of_expertise": "Pharmacology", "is_primary": True},
        ],
        "expert_address": [
            {"city": "Dallas", "state": {"label": "Texas"}, "is_primary": False},
            {"city": "Austin", "state": {"label": "Texas"}, "is_primary": True},
        ],
        "profile_image": "https://cdn.example.test/ana.png",
        "profile_claimed": True,
        "profile_introduction": "Board certified.",
    }
    record.update(overrides)
    return record


class TestDisplayName:
    def test_joins_present_parts(self) -> None:
        assert display_name(_record()) == "Dr. Ana Ruiz PhD"

    def test_blank_parts_skipped(self) -> None:
        assert display_name({"first_name": " Li ", "last_name": "", "salutation": None}) == "Li"

    def test_empty_record(self) -> None:
        assert display_name({}) == ""


class TestPrimaryAddress:
    def test_primary_flag_wins(self) -> None:
        assert primary_address(_record()["expert_address"]) == Location("Austin", "Texas")

    def test_falls_back_to_first(self) -> None:
        addresses = [{"city": "Lyon", "state": None}, {"city": "Paris"}]
        assert primary_address(addresses) == Location("Lyon", "")

    def test_none(self) -> None:
        assert primary_address(None) == Location()
        assert primary_address([]) == Location()

    def test_non_object_entries_skipped(self) -> None:
        addresses = [None, "Austin", {"city": "Reno", "state": {"label": "Nevada"}}]
        assert primary_address(addresses) == Location("Reno", "Nevada")

    def test_non_list_treated_as_empty(self) -> None:
        assert primary_address({"city": "Reno"}) == Location()
        assert primary_address("Reno") == Location()
        assert primary_address([None]) == Location()

    def test_str(self) -> None:
        assert str(Location("Austin", "Texas")) == "Austin, Texas"
        assert str(Location("", "Texas")) == "Texas"


class TestSplitExpertise:
    def test_primary_first(self) -> None:
        assert split_expertise(_record()["expert_area_of_expertise"]) == ("Pharmacology", ("Toxicology",))

    def test_order_kept_without_primary(self) -> None:
        items = [{"area_of_expertise": "A"}, {"area_of_expertise": "B"}, {"area_of_expertise": "C"}]
        assert split_expertise(items) == ("A", ("B", "C"))

    def test_empty(self) -> None:
        assert split_expertise(None) == ("", ())

    def test_non_object_entries_skipped(self) -> None:
        items = [None, 3, {"area_of_expertise": "Toxicology"}]
        assert split_expertise(items) == ("Toxicology", ())
        assert split_expertise("Toxicology") == ("", ())


class TestPresent:
    def test_full_record(self) -> None:
        summary = present(_record())
        assert summary.id == 7
        assert summary.name == "Dr. Ana Ruiz PhD"
        assert summary.title == "Pharmacology"
        assert summary.specialties == ("Toxicology",)
        assert summary.location == Location("Austin", "Texas")
        assert summary.is_verified is True
        assert summary.status == "claimed"
        assert summary.bio == "Board certified."

    def test_defaults(self) -> None:
        summary = present({"id": 1})
        assert summary.rating == 4
        assert summary.languages == ("English",)
        assert summary.status == "unclaimed"
        assert summary.image_url is None

    def test_present_all_keeps_order(self) -> None:
        summaries = present_all([{"id": 2}, {"id": 1}])
        assert [s.id for s in summaries] == [2, 1]
        assert all(isinstance(s, ExpertSummary) for s in summaries)

    def test_languages_must_be_a_list(self) -> None:
        assert present({"id": 1, "languages": 5}).languages == ("English",)
        assert present({"id": 1, "languages": "French"}).languages == ("English",)
        assert present({"id": 1, "languages": ["French", None]}).languages == ("French",)

    def test_badly_shaped_record_still_presented(self) -> None:
        summary = present(
            {
                "id": 2,
                "expert_address": [None],
                "expert_area_of_expertise": [None],
                "languages": None,
            }
        )
        assert summary.location == Location()
        assert summary.title == ""
        assert summary.specialties == ()
        assert summary.languages == ("English",)
