"""
Unit Tests for Contract Dispatch

Name resolution, argument checking, aliases and result encoding.
"""

from typing import ClassVar

import pytest
from pydantic import Field

from core.ledger import (
    AccessPolicy,
    AuthorizationDeniedError,
    AuthorizationGate,
    ClientIdentity,
    Contract,
    InvalidArgumentsError,
    LedgerRecord,
    TransactionContext,
    TransactionStub,
    UnknownTransactionError,
    decode_result,
    encode_result,
    transaction,
)

pytestmark = [pytest.mark.unit]


class NoteRecord(LedgerRecord):
    KEY_FIELD: ClassVar[str] = "note_id"
    KIND: ClassVar[str] = "note"

    note_id: str = Field(..., alias="noteID")
    text: str


class NotesContract(Contract):
    contract_name = "notes"

    @transaction("createPersonnel", "LegacyCreate")
    async def create(self, ctx: TransactionContext, note_id: str, text: str) -> NoteRecord:
        return NoteRecord(note_id=note_id, text=text)

    @transaction("personnelExists")
    async def exists(self, ctx: TransactionContext, note_id: str) -> bool:
        return note_id == "N1"


@pytest.fixture
def contract() -> NotesContract:
    return NotesContract(AuthorizationGate("Org1MSP", AccessPolicy.from_profile("observed")))


@pytest.fixture
def ctx(ledger, org1) -> TransactionContext:
    return TransactionContext(stub=TransactionStub(ledger, "tx-unit"), client_identity=org1)


class TestRegistry:
    """Tests for transaction registration"""

    def test_transaction_names_exclude_aliases(self, contract):
        assert contract.transaction_names() == ["createPersonnel", "personnelExists"]

    def test_alias_resolves_to_same_function(self, contract):
        assert contract.get_transaction("LegacyCreate") is contract.get_transaction("createPersonnel")

    def test_arity_excludes_self_and_ctx(self, contract):
        assert contract.get_transaction("createPersonnel").arity == 2
        assert contract.get_transaction("personnelExists").parameters == ("note_id",)

    def test_unknown_function(self, contract):
        with pytest.raises(UnknownTransactionError, match="function dropAll not found in contract notes"):
            contract.get_transaction("dropAll")

    def test_sync_function_rejected(self):
        with pytest.raises(TypeError):
            @transaction("syncThing")
            def sync_thing(self, ctx):
                return None


class TestInvoke:
    """Tests for Contract.invoke"""

    @pytest.mark.asyncio
    async def test_invoke_encodes_record(self, contract, ctx):
        raw = await contract.invoke(ctx, "createPersonnel", ["N1", "hello"])

        assert decode_result(raw) == {"noteID": "N1", "text": "hello"}

    @pytest.mark.asyncio
    async def test_invoke_through_alias(self, contract, ctx):
        raw = await contract.invoke(ctx, "LegacyCreate", ["N2", "hi"])

        assert decode_result(raw)["noteID"] == "N2"

    @pytest.mark.asyncio
    async def test_wrong_argument_count(self, contract, ctx):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            await contract.invoke(ctx, "createPersonnel", ["N1"])

        assert "incorrect number of params for createPersonnel" in str(exc_info.value)
        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1

    @pytest.mark.asyncio
    async def test_non_string_argument(self, contract, ctx):
        with pytest.raises(InvalidArgumentsError, match="must be a string"):
            await contract.invoke(ctx, "personnelExists", [42])

    @pytest.mark.asyncio
    async def test_gate_applied_on_invoke(self, contract, ledger, org2):
        ctx = TransactionContext(stub=TransactionStub(ledger, "tx-unit"), client_identity=org2)

        with pytest.raises(AuthorizationDeniedError):
            await contract.invoke(ctx, "createPersonnel", ["N1", "hello"])

    @pytest.mark.asyncio
    async def test_gate_applied_on_direct_call(self, contract, ledger, org2):
        ctx = TransactionContext(stub=TransactionStub(ledger, "tx-unit"), client_identity=org2)

        with pytest.raises(AuthorizationDeniedError):
            await contract.create(ctx, "N1", "hello")

    @pytest.mark.asyncio
    async def test_open_operation_for_other_organization(self, contract, ledger, org2):
        ctx = TransactionContext(stub=TransactionStub(ledger, "tx-unit"), client_identity=org2)

        assert decode_result(await contract.invoke(ctx, "personnelExists", ["N1"])) is True


class TestResultEncoding:
    """Tests for encode_result / decode_result"""

    def test_none_is_empty(self):
        assert encode_result(None) == b""
        assert decode_result(b"") is None

    def test_bool(self):
        assert encode_result(False) == b"false"

    def test_record_list_is_json_array(self):
        raw = encode_result([NoteRecord(note_id="N1", text="a"), NoteRecord(note_id="N2", text="b")])

        assert decode_result(raw) == [
            {"noteID": "N1", "text": "a"},
            {"noteID": "N2", "text": "b"},
        ]

    def test_empty_list(self):
        assert encode_result([]) == b"[]"


class TestClientIdentity:
    """Tests for ClientIdentity"""

    def test_msp_id_is_stripped(self):
        assert ClientIdentity("  Org1MSP ").get_msp_id() == "Org1MSP"
