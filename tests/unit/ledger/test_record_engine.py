"""
Unit Tests for the Record CRUD Engine

Uses a small badge record so the engine is exercised independently of the
personnel and case contracts.
"""

from typing import ClassVar, Optional

import pytest
from pydantic import Field

from core.ledger import (
    LedgerRecord,
    LedgerStorageError,
    RecordAlreadyExistsError,
    RecordEngine,
    RecordNotFoundError,
    RecordSerializationError,
    StateQueryIterator,
    TransactionStub,
)

pytestmark = [pytest.mark.unit]


class BadgeRecord(LedgerRecord):
    KEY_FIELD: ClassVar[str] = "badge_id"
    KIND: ClassVar[str] = "badge"

    badge_id: str = Field(..., alias="badgeID")
    holder: str


class TrackingStub(TransactionStub):
    """Keeps a handle on the last range iterator handed out"""

    last_iterator: Optional[StateQueryIterator] = None

    async def get_state_by_range(self, start_key, end_key):
        self.last_iterator = await super().get_state_by_range(start_key, end_key)
        return self.last_iterator


class BrokenIterator(StateQueryIterator):
    async def __anext__(self):
        raise RuntimeError("cursor lost")


class BrokenRangeStub(TransactionStub):
    last_iterator: Optional[StateQueryIterator] = None

    async def get_state_by_range(self, start_key, end_key):
        self.last_iterator = BrokenIterator([])
        return self.last_iterator


class FailingStub(TransactionStub):
    """State store whose every call fails"""

    async def get_state(self, key):
        raise RuntimeError("peer unavailable")

    async def put_state(self, key, value):
        raise RuntimeError("peer unavailable")

    async def del_state(self, key):
        raise RuntimeError("peer unavailable")


@pytest.fixture
def engine() -> RecordEngine[BadgeRecord]:
    return RecordEngine(BadgeRecord, "badge")


@pytest.fixture
def stub(ledger) -> TrackingStub:
    return TrackingStub(ledger, "tx-unit")


def badge(badge_id: str, holder: str = "Anjali") -> BadgeRecord:
    return BadgeRecord(badge_id=badge_id, holder=holder)


class TestKeys:
    """Tests for key namespacing"""

    def test_namespaced_state_key(self, engine):
        assert engine.state_key("B1") == "badge\x00B1"

    def test_namespaced_scan_bounds(self, engine):
        assert engine.scan_bounds() == ("badge\x00", "badge\x01")

    def test_empty_key_rejected_in_namespaced_mode(self, engine):
        with pytest.raises(LedgerStorageError, match="badge key must be a non-empty string"):
            engine.state_key("")

    def test_raw_keys_when_namespacing_disabled(self):
        engine = RecordEngine(BadgeRecord, "badge", namespacing=False)

        assert engine.state_key("B1") == "B1"
        assert engine.scan_bounds() == ("", "")

    def test_encoding_uses_wire_names(self, engine):
        assert engine.encode(badge("B1")) == b'{"badgeID":"B1","holder":"Anjali"}'


class TestCrud:
    """Tests for create / read / update / delete / exists"""

    @pytest.mark.asyncio
    async def test_create_then_read(self, engine, stub):
        await engine.create(stub, badge("B1"))

        assert await engine.exists(stub, "B1") is True
        assert await engine.read(stub, "B1") == badge("B1")

    @pytest.mark.asyncio
    async def test_create_existing_fails(self, engine, stub):
        await engine.create(stub, badge("B1"))

        with pytest.raises(RecordAlreadyExistsError, match="the badge B1 already exists"):
            await engine.create(stub, badge("B1", holder="Other"))
        assert (await engine.read(stub, "B1")).holder == "Anjali"

    @pytest.mark.asyncio
    async def test_read_missing_fails(self, engine, stub):
        with pytest.raises(RecordNotFoundError, match="the badge B9 does not exist"):
            await engine.read(stub, "B9")

    @pytest.mark.asyncio
    async def test_update_replaces_record(self, engine, stub):
        await engine.create(stub, badge("B1"))
        await engine.update(stub, badge("B1", holder="Rahul"))

        assert (await engine.read(stub, "B1")).holder == "Rahul"

    @pytest.mark.asyncio
    async def test_update_missing_fails(self, engine, stub):
        with pytest.raises(RecordNotFoundError):
            await engine.update(stub, badge("B9"))
        assert stub.write_set == {}

    @pytest.mark.asyncio
    async def test_delete(self, engine, stub):
        await engine.create(stub, badge("B1"))
        await engine.delete(stub, "B1")

        assert await engine.exists(stub, "B1") is False

    @pytest.mark.asyncio
    async def test_delete_missing_fails(self, engine, stub):
        with pytest.raises(RecordNotFoundError):
            await engine.delete(stub, "B9")

    @pytest.mark.asyncio
    async def test_corrupt_value_fails_to_decode(self, engine, ledger):
        ledger.commit({"badge\x00B1": b"{not json"})
        stub = TransactionStub(ledger, "tx-unit")

        with pytest.raises(RecordSerializationError) as exc_info:
            await engine.read(stub, "B1")
        assert exc_info.value.key == "B1"

    @pytest.mark.asyncio
    async def test_same_key_in_two_namespaces_does_not_collide(self, stub):
        badges = RecordEngine(BadgeRecord, "badge")
        spares = RecordEngine(BadgeRecord, "spare")

        await badges.create(stub, badge("X1", holder="first"))
        await spares.create(stub, badge("X1", holder="second"))

        assert (await badges.read(stub, "X1")).holder == "first"
        assert (await spares.read(stub, "X1")).holder == "second"


class TestSeed:
    """Tests for bootstrap seeding"""

    @pytest.mark.asyncio
    async def test_seed_skips_existing(self, engine, stub):
        await engine.create(stub, badge("B1", holder="edited"))

        written = await engine.seed(stub, [badge("B1"), badge("B2")])

        assert written == 1
        assert (await engine.read(stub, "B1")).holder == "edited"

    @pytest.mark.asyncio
    async def test_seed_overwrite(self, engine, stub):
        await engine.create(stub, badge("B1", holder="edited"))

        written = await engine.seed(stub, [badge("B1"), badge("B2")], overwrite=True)

        assert written == 2
        assert (await engine.read(stub, "B1")).holder == "Anjali"


class TestScan:
    """Tests for enumeration"""

    @pytest.mark.asyncio
    async def test_scan_yields_only_own_kind_in_key_order(self, engine, stub):
        other = RecordEngine(BadgeRecord, "zzz")
        await engine.create(stub, badge("B2"))
        await engine.create(stub, badge("B1"))
        await other.create(stub, badge("B0"))

        records = [r async for r in engine.scan_all(stub)]

        assert [r.badge_id for r in records] == ["B1", "B2"]
        assert stub.last_iterator.closed is True

    @pytest.mark.asyncio
    async def test_scan_empty(self, engine, stub):
        assert [r async for r in engine.scan_all(stub)] == []

    @pytest.mark.asyncio
    async def test_iterator_closed_when_decode_fails(self, engine, ledger):
        ledger.commit({"badge\x00B1": b'{"badgeID":"B1"}'})
        stub = TrackingStub(ledger, "tx-unit")

        with pytest.raises(RecordSerializationError):
            [r async for r in engine.scan_all(stub)]

        assert stub.last_iterator.closed is True

    @pytest.mark.asyncio
    async def test_iteration_failure_wrapped_and_closed(self, engine, ledger):
        stub = BrokenRangeStub(ledger, "tx-unit")

        with pytest.raises(LedgerStorageError, match="failed to iterate range query"):
            [r async for r in engine.scan_all(stub)]

        assert stub.last_iterator.closed is True

    @pytest.mark.asyncio
    async def test_raw_keys_scan_sees_foreign_records(self, ledger):
        ledger.commit({"A1": b'{"caseID":"A1","status":"Open"}'})
        stub = TransactionStub(ledger, "tx-unit")
        engine = RecordEngine(BadgeRecord, "badge", namespacing=False)

        with pytest.raises(RecordSerializationError):
            [r async for r in engine.scan_all(stub)]


class TestStorageErrors:
    """Tests for wrapping store failures"""

    @pytest.mark.asyncio
    async def test_read_failure_wrapped(self, engine, ledger):
        stub = FailingStub(ledger, "tx-unit")

        with pytest.raises(LedgerStorageError, match="failed to read from world state"):
            await engine.exists(stub, "B1")

    @pytest.mark.asyncio
    async def test_write_failure_wrapped(self, engine, ledger):
        stub = FailingStub(ledger, "tx-unit")

        with pytest.raises(LedgerStorageError, match="failed to put to world state"):
            await engine.put(stub, badge("B1"))

    @pytest.mark.asyncio
    async def test_empty_key_surfaces_as_storage_error(self, ledger):
        engine = RecordEngine(BadgeRecord, "badge", namespacing=False)

        with pytest.raises(LedgerStorageError):
            await engine.exists(TransactionStub(ledger, "tx-unit"), "")
