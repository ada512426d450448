"""Tests for the enclosure repository and seed data."""

from __future__ import annotations

import pytest

from zooplanner_app.init_zoo import DEFAULT_ENCLOSURES, seed_default_enclosures
from zooplanner_app.models import EnclosureDefinition
from zooplanner_app.repositories.enclosure_repository import EnclosureORM, EnclosureRepository


class TestEnclosureRepository:
    def test_create_and_get(self, db_session):
        repo = EnclosureRepository(db_session)
        created = repo.create(EnclosureDefinition(
            habitats=["rio", "savana"], total_capacity=7, residents=[("GAZELA", 1)]
        ))
        assert created.id is not None

        fetched = repo.get(created.id)
        assert fetched is not None
        assert fetched.habitats == ["rio", "savana"]
        assert fetched.total_capacity == 7
        assert fetched.residents == [("GAZELA", 1)]

    def test_get_missing(self, db_session):
        assert EnclosureRepository(db_session).get(123) is None

    def test_list_empty(self, db_session):
        repo = EnclosureRepository(db_session)
        assert repo.list() == []
        assert repo.count() == 0

    def test_list_ordered_by_id(self, db_session):
        repo = EnclosureRepository(db_session)
        repo.create(EnclosureDefinition(id=4, habitats=["rio"], total_capacity=8))
        repo.create(EnclosureDefinition(id=2, habitats=["floresta"], total_capacity=5))
        assert [d.id for d in repo.list()] == [2, 4]

    def test_create_rejects_non_positive_capacity(self, db_session):
        with pytest.raises(ValueError):
            EnclosureRepository(db_session).create(EnclosureDefinition(habitats=["rio"], total_capacity=0))

    def test_create_rejects_unknown_habitat(self, db_session):
        repo = EnclosureRepository(db_session)
        with pytest.raises(ValueError):
            repo.create(EnclosureDefinition(habitats=["savana", "deserto"], total_capacity=6))
        assert repo.count() == 0

    def test_add_resident_keeps_order(self, db_session):
        repo = EnclosureRepository(db_session)
        d = repo.create(EnclosureDefinition(habitats=["savana"], total_capacity=10, residents=[("MACACO", 3)]))
        repo.add_resident(d.id, "GAZELA", 1)
        repo.add_resident(d.id, "MACACO", 2)
        assert repo.get(d.id).residents == [("MACACO", 3), ("GAZELA", 1), ("MACACO", 2)]

    def test_add_resident_missing_enclosure(self, db_session):
        with pytest.raises(ValueError):
            EnclosureRepository(db_session).add_resident(77, "MACACO", 2)

    def test_delete(self, db_session):
        repo = EnclosureRepository(db_session)
        d = repo.create(EnclosureDefinition(habitats=["rio"], total_capacity=8, residents=[("CROCODILO", 1)]))
        repo.delete(d.id)
        assert repo.get(d.id) is None
        repo.delete(d.id)  # deleting twice is harmless

    def test_malformed_habitats_json(self, db_session):
        """Malformed habitats_json loads as no habitats instead of crashing."""
        repo = EnclosureRepository(db_session)
        d = repo.create(EnclosureDefinition(habitats=["rio"], total_capacity=8))
        obj = db_session.get(EnclosureORM, d.id)
        obj.habitats_json = "not valid json"
        db_session.commit()
        assert repo.get(d.id).habitats == []


class TestSeed:
    def test_seed_creates_default_enclosures(self, db_session):
        assert seed_default_enclosures(db_session) == 5
        stored = EnclosureRepository(db_session).list()
        assert [d.id for d in stored] == [1, 2, 3, 4, 5]
        assert [d.total_capacity for d in stored] == [10, 5, 7, 8, 9]
        assert stored[0].residents == [("MACACO", 3)]
        assert stored[2].habitats == ["rio", "savana"]
        assert stored[4].residents == [("LEAO", 1)]

    def test_seed_is_idempotent(self, db_session):
        seed_default_enclosures(db_session)
        assert seed_default_enclosures(db_session) == 0
        assert EnclosureRepository(db_session).count() == 5

    def test_seed_does_not_alias_defaults(self, db_session):
        seed_default_enclosures(db_session)
        assert [d.id for d in DEFAULT_ENCLOSURES] == [1, 2, 3, 4, 5]
        assert DEFAULT_ENCLOSURES[1].residents == []
