"""Tests for services/school_service.py — creation and listing."""

import uuid

import pytest

from school_management_api.app.core.exceptions import StorageError, ValidationError
from school_management_api.app.schemas.school import SchoolCreate
from school_management_api.app.services.distance import Coordinate
from school_management_api.app.services.school_service import SchoolService

pytestmark = pytest.mark.asyncio


async def _create(store, name, latitude, longitude, address="Somewhere"):
    data = SchoolCreate(name=name, address=address, latitude=latitude, longitude=longitude)
    return await SchoolService.create_school(store, data)


# ── create_school ────────────────────────────────────────────────────


class TestCreateSchool:
    async def test_created_school_is_listed_with_fresh_id(self, store, oak_elementary):
        other_id = await _create(store, "Pine High", 41.0, -74.0)
        school_id = await SchoolService.create_school(store, SchoolCreate(**oak_elementary))

        schools = await SchoolService.list_schools(store)
        matches = [s for s in schools if s.name == "Oak Elementary"]
        assert len(matches) == 1
        oak = matches[0]
        assert oak.id == school_id
        assert oak.id != other_id
        assert (oak.address, oak.latitude, oak.longitude) == ("1 Oak St", 40.0, -75.0)
        assert uuid.UUID(oak.id).version == 4

    async def test_name_and_address_are_trimmed(self, store):
        data = SchoolCreate(name="  Elm Academy ", address=" 2 Elm Rd  ", latitude=1, longitude=2)
        await SchoolService.create_school(store, data)
        [school] = await SchoolService.list_schools(store)
        assert school.name == "Elm Academy"
        assert school.address == "2 Elm Rd"

    async def test_blank_name_rejected_without_writing(self, store):
        data = SchoolCreate.model_construct(name="   ", address="1 Oak St", latitude=0.0, longitude=0.0)
        with pytest.raises(ValidationError):
            await SchoolService.create_school(store, data)
        assert store.select_all() == []

    async def test_non_finite_coordinates_rejected(self, store):
        data = SchoolCreate.model_construct(
            name="Oak Elementary", address="1 Oak St", latitude=float("nan"), longitude=0.0
        )
        with pytest.raises(ValidationError):
            await SchoolService.create_school(store, data)

    @pytest.mark.parametrize("latitude, longitude", [(True, 0.0), (0.0, False)])
    async def test_boolean_coordinates_rejected(self, store, latitude, longitude):
        data = SchoolCreate.model_construct(
            name="Oak Elementary", address="1 Oak St", latitude=latitude, longitude=longitude
        )
        with pytest.raises(ValidationError, match="finite numbers"):
            await SchoolService.create_school(store, data)
        assert store.select_all() == []

    async def test_out_of_range_latitude_accepted_by_default(self, store):
        school_id = await _create(store, "Nowhere School", 999.0, 0.0)
        [school] = await SchoolService.list_schools(store)
        assert school.id == school_id
        assert school.latitude == 999.0

    async def test_out_of_range_latitude_rejected_when_enforced(self, store):
        data = SchoolCreate(name="Nowhere School", address="x", latitude=999.0, longitude=0.0)
        with pytest.raises(ValidationError, match="Latitude must be between -90 and 90 degrees"):
            await SchoolService.create_school(store, data, enforce_ranges=True)
        assert store.select_all() == []

    async def test_duplicates_are_allowed(self, store, oak_elementary):
        first = await SchoolService.create_school(store, SchoolCreate(**oak_elementary))
        second = await SchoolService.create_school(store, SchoolCreate(**oak_elementary))
        assert first != second
        assert len(await SchoolService.list_schools(store)) == 2

    async def test_storage_failure_propagates(self, broken_store, oak_elementary):
        with pytest.raises(StorageError, match="no such table"):
            await SchoolService.create_school(broken_store, SchoolCreate(**oak_elementary))


# ── list_schools ─────────────────────────────────────────────────────


class TestListSchools:
    async def test_ordered_by_name_case_sensitive(self, store):
        for name in ("beta", "Gamma", "Alpha", "alpha"):
            await _create(store, name, 0.0, 0.0)
        names = [s.name for s in await SchoolService.list_schools(store)]
        assert names == ["Alpha", "Gamma", "alpha", "beta"]

    async def test_empty_store(self, store):
        assert await SchoolService.list_schools(store) == []


# ── list_schools_by_distance ─────────────────────────────────────────


class TestListSchoolsByDistance:
    async def test_sorted_nearest_first(self, store):
        await _create(store, "Far", 10.0, 10.0)
        await _create(store, "Near", 0.0, 0.1)
        await _create(store, "Middle", 1.0, 1.0)

        ranked = await SchoolService.list_schools_by_distance(store, Coordinate(0.0, 0.0))

        assert [s.name for s in ranked] == ["Near", "Middle", "Far"]
        distances = [s.distance for s in ranked]
        assert distances == sorted(distances)
        assert all(d >= 0 for d in distances)

    async def test_length_matches_store(self, store):
        for i in range(7):
            await _create(store, f"School {i}", i * 3.0, -i * 2.0)
        ranked = await SchoolService.list_schools_by_distance(store, Coordinate(5.0, 5.0))
        assert len(ranked) == len(store.select_all()) == 7

    async def test_ties_keep_store_order(self, store):
        for name in ("Zeta", "Alpha", "Mu"):
            await _create(store, name, 3.0, 3.0)
        store_order = [row["name"] for row in store.select_all()]
        ranked = await SchoolService.list_schools_by_distance(store, Coordinate(0.0, 0.0))
        assert [s.name for s in ranked] == store_order

    async def test_distance_matches_calculator(self, store):
        await _create(store, "Equator", 0.0, 1.0)
        [school] = await SchoolService.list_schools_by_distance(store, Coordinate(0.0, 0.0))
        assert school.distance == pytest.approx(111.19, abs=0.5)

    async def test_empty_store(self, store):
        assert await SchoolService.list_schools_by_distance(store, Coordinate(0.0, 0.0)) == []

    async def test_storage_failure_propagates(self, broken_store):
        with pytest.raises(StorageError):
            await SchoolService.list_schools_by_distance(broken_store, Coordinate(0.0, 0.0))
