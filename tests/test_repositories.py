"""
Tests for the resource repositories against SQLite
"""
import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from app.core.database import Database, QueryResult, create_database_engine
from app.core.exceptions import (
    DatabaseError,
    NoFieldsProvidedError,
    NotFoundError,
    UnknownFieldError
)
from app.models.base import Base
from app.models import Evento, Organizador, Participante, Registro
from app.repositories import (
    OrganizerRepository,
    EventRepository,
    ParticipantRepository,
    RegistrationRepository
)


async def seed_registration(database: Database) -> dict:
    organizer = await OrganizerRepository(database).create({"name": "Org"})
    event = await EventRepository(database).create({
        "organizador_id": organizer["id"],
        "title": "Workshop de Programação",
        "start_at": datetime(2025, 10, 10, 12, 0, tzinfo=timezone.utc),
        "capacity": 40,
        "price": 120.0,
        "status": "published"
    })
    participant = await ParticipantRepository(database).create({"full_name": "Ana Maria Silva"})
    registration = await RegistrationRepository(database).create({
        "evento_id": event["id"],
        "participante_id": participant["id"],
        "status": "pending",
        "paid_amount": 0
    })
    return {
        "organizer": organizer,
        "event": event,
        "participant": participant,
        "registration": registration
    }


class TestAllowLists:
    """Allow-lists match the mutable columns of each table"""

    @pytest.mark.parametrize("repository_cls, model, server_managed", [
        (OrganizerRepository, Organizador, set()),
        (EventRepository, Evento, set()),
        (ParticipantRepository, Participante, {"created_at"}),
        (RegistrationRepository, Registro, {"created_at"}),
    ])
    def test_allow_list_covers_mutable_columns(self, repository_cls, model, server_managed):
        columns = {column.name for column in model.__table__.columns}

        assert repository_cls.table == model.__tablename__
        assert "id" not in repository_cls.mutable_fields
        assert repository_cls.mutable_fields == columns - {"id"} - server_managed
        assert set(repository_cls.columns) == repository_cls.mutable_fields


class TestOrganizerRepository:
    """CRUD round trips for one resource"""

    @pytest.mark.asyncio
    async def test_create_assigns_identifier(self, database):
        repository = OrganizerRepository(database)

        organizer = await repository.create({"name": "Tech Events", "email": "a@b.c"})

        assert len(organizer["id"]) == 36
        assert organizer["name"] == "Tech Events"
        assert organizer["contact_phone"] is None

    @pytest.mark.asyncio
    async def test_list(self, database):
        repository = OrganizerRepository(database)
        await repository.create({"name": "A"})
        await repository.create({"name": "B"})

        rows = await repository.list()

        assert sorted(row["name"] for row in rows) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_get_by_id(self, database):
        repository = OrganizerRepository(database)
        created = await repository.create({"name": "A"})

        assert await repository.get_by_id(created["id"]) == created

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, database):
        with pytest.raises(NotFoundError) as exc_info:
            await OrganizerRepository(database).get_by_id("missing-id")

        assert exc_info.value.message == "Organizador não encontrado"

    @pytest.mark.asyncio
    async def test_update_writes_only_supplied_fields(self, database):
        repository = OrganizerRepository(database)
        created = await repository.create({"name": "A", "email": "a@b.c", "contact_phone": "123"})

        updated = await repository.update(created["id"], {"name": "X"})

        assert updated == {**created, "name": "X"}

    @pytest.mark.asyncio
    async def test_update_explicit_null(self, database):
        repository = OrganizerRepository(database)
        created = await repository.create({"name": "A", "email": "a@b.c"})

        updated = await repository.update(created["id"], {"email": None})

        assert updated["email"] is None
        assert updated["name"] == "A"

    @pytest.mark.asyncio
    async def test_delete(self, database):
        repository = OrganizerRepository(database)
        created = await repository.create({"name": "A"})

        await repository.delete(created["id"])

        with pytest.raises(NotFoundError):
            await repository.get_by_id(created["id"])

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, database):
        with pytest.raises(NotFoundError):
            await OrganizerRepository(database).delete("missing-id")

    @pytest.mark.asyncio
    async def test_constraint_violation_is_database_error(self, database):
        with pytest.raises(DatabaseError) as exc_info:
            await OrganizerRepository(database).create({"email": "no-name@b.c"})

        assert "NOT NULL" in exc_info.value.message


class TestUpdateEdgeCases:
    """Empty, unknown and unmatched updates"""

    @pytest.mark.asyncio
    async def test_empty_payload_issues_no_statement(self, database, monkeypatch):
        execute = AsyncMock(return_value=QueryResult())
        monkeypatch.setattr(database, "execute", execute)

        with pytest.raises(NoFieldsProvidedError):
            await ParticipantRepository(database).update("p-1", {})

        execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_field_issues_no_statement(self, database, monkeypatch):
        execute = AsyncMock(return_value=QueryResult())
        monkeypatch.setattr(database, "execute", execute)

        with pytest.raises(UnknownFieldError):
            await OrganizerRepository(database).update("org-1", {"nickname": "x"})

        execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unmatched_identifier_raises_not_found(self, database):
        with pytest.raises(NotFoundError) as exc_info:
            await RegistrationRepository(database).update("missing-id", {"status": "confirmed"})

        assert exc_info.value.message == "Registro não encontrado"
        assert exc_info.value.details["id"] == "missing-id"


class TestParticipantRepository:
    """JSON profile handling"""

    @pytest.mark.asyncio
    async def test_profile_round_trip(self, database):
        repository = ParticipantRepository(database)
        profile = {"interesses": ["IA", "Cloud"], "nivel": 3}

        created = await repository.create({"full_name": "Ana", "profile": profile})
        fetched = await repository.get_by_id(created["id"])

        assert created["profile"] == profile
        assert fetched["profile"] == profile
        assert fetched["created_at"] is not None

    @pytest.mark.asyncio
    async def test_profile_replaced_on_update(self, database):
        repository = ParticipantRepository(database)
        created = await repository.create({"full_name": "Ana", "profile": {"a": 1}})

        updated = await repository.update(created["id"], {"profile": {"b": 2}})

        assert updated["profile"] == {"b": 2}
        assert updated["full_name"] == "Ana"


class TestRegistrationRepository:
    """Joined reads"""

    @pytest.mark.asyncio
    async def test_list_joins_participant_and_event(self, database):
        seeded = await seed_registration(database)

        rows = await RegistrationRepository(database).list()

        assert len(rows) == 1
        assert rows[0]["id"] == seeded["registration"]["id"]
        assert rows[0]["full_name"] == "Ana Maria Silva"
        assert rows[0]["title"] == "Workshop de Programação"

    @pytest.mark.asyncio
    async def test_get_by_id_joins_participant_and_event(self, database):
        seeded = await seed_registration(database)

        row = await RegistrationRepository(database).get_by_id(seeded["registration"]["id"])

        assert row["status"] == "pending"
        assert row["full_name"] == "Ana Maria Silva"
        assert row["title"] == "Workshop de Programação"

    @pytest.mark.asyncio
    async def test_status_is_free_text(self, database):
        seeded = await seed_registration(database)

        updated = await RegistrationRepository(database).update(
            seeded["registration"]["id"], {"status": "waitlisted"}
        )

        assert updated["status"] == "waitlisted"


class TestConcurrentUpdates:
    """Disjoint updates to one row from separate connections"""

    @pytest.mark.asyncio
    async def test_disjoint_updates_both_apply(self, tmp_path):
        engine = create_database_engine(f"sqlite+aiosqlite:///{tmp_path / 'concurrency.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        database = Database(engine)
        try:
            repository = OrganizerRepository(database)
            created = await repository.create({"name": "A", "email": "a@b.c"})

            await asyncio.gather(
                repository.update(created["id"], {"name": "B"}),
                repository.update(created["id"], {"contact_phone": "999"}),
            )

            final = await repository.get_by_id(created["id"])
            assert final["name"] == "B"
            assert final["contact_phone"] == "999"
            assert final["email"] == "a@b.c"
        finally:
            await engine.dispose()


class TestForeignKeys:
    """Referential integrity and cascading deletes"""

    @pytest.mark.asyncio
    async def test_dangling_reference_rejected(self, database):
        with pytest.raises(DatabaseError) as exc_info:
            await RegistrationRepository(database).create({
                "evento_id": "missing-event",
                "participante_id": "missing-participant"
            })

        assert "FOREIGN KEY" in exc_info.value.message
        assert await RegistrationRepository(database).list() == []

    @pytest.mark.asyncio
    async def test_update_to_dangling_reference_rejected(self, database):
        seeded = await seed_registration(database)

        with pytest.raises(DatabaseError):
            await RegistrationRepository(database).update(
                seeded["registration"]["id"], {"evento_id": "missing-event"}
            )

    @pytest.mark.asyncio
    async def test_deleting_organizer_cascades(self, database):
        seeded = await seed_registration(database)

        await OrganizerRepository(database).delete(seeded["organizer"]["id"])

        with pytest.raises(NotFoundError):
            await EventRepository(database).get_by_id(seeded["event"]["id"])
        with pytest.raises(NotFoundError):
            await RegistrationRepository(database).delete(seeded["registration"]["id"])
        assert await ParticipantRepository(database).get_by_id(seeded["participant"]["id"])

    @pytest.mark.asyncio
    async def test_engine_factory_enforces_foreign_keys(self, tmp_path):
        engine = create_database_engine(f"sqlite+aiosqlite:///{tmp_path / 'fk.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        try:
            with pytest.raises(DatabaseError):
                await EventRepository(Database(engine)).create({
                    "organizador_id": "missing-organizer",
                    "title": "Sem organizador",
                    "start_at": datetime(2025, 10, 10, 12, 0, tzinfo=timezone.utc)
                })
        finally:
            await engine.dispose()
