"""
Contract Runner

Plays the ledger platform's part for one contract: builds the transaction
context, runs the invocation and commits its write set only when it succeeds.
Submissions are serialized so each one sees the state left by the previous.

Usage:
    runner = ContractRunner(contract, get_ledger("mychannel"))

    await runner.submit_transaction("createPersonnel", *fields, identity=ClientIdentity("Org1MSP"))
    raw = await runner.evaluate_transaction("readPersonnel", "POL12345", identity=identity)
"""

import asyncio
import logging
import uuid
from typing import Optional

from .contract import Contract, TransactionContext
from .errors import LedgerContractError
from .identity import ClientIdentity, ClientIdentityProtocol
from .stub import InMemoryLedger, TransactionStub

logger = logging.getLogger(__name__)


class ContractRunner:
    """Executes invocations of one contract against an in-memory ledger"""

    def __init__(self, contract: Contract, ledger: InMemoryLedger):
        self.contract = contract
        self.ledger = ledger
        self._ordering_lock = asyncio.Lock()

    async def submit_transaction(
        self,
        function_name: str,
        *args: str,
        identity: Optional[ClientIdentityProtocol] = None,
    ) -> bytes:
        """Run and commit; a failed invocation leaves the ledger unchanged"""
        async with self._ordering_lock:
            return await self._execute(function_name, args, identity, commit=True)

    async def evaluate_transaction(
        self,
        function_name: str,
        *args: str,
        identity: Optional[ClientIdentityProtocol] = None,
    ) -> bytes:
        """Run against current state without committing anything"""
        return await self._execute(function_name, args, identity, commit=False)

    async def _execute(
        self,
        function_name: str,
        args,
        identity: Optional[ClientIdentityProtocol],
        commit: bool,
    ) -> bytes:
        tx_id = uuid.uuid4().hex
        stub = TransactionStub(self.ledger, tx_id)
        ctx = TransactionContext(
            stub=stub,
            client_identity=identity if identity is not None else ClientIdentity(),
        )

        try:
            result = await self.contract.invoke(ctx, function_name, list(args))
        except LedgerContractError as e:
            logger.warning(
                f"Transaction {self.contract.contract_name}.{function_name} [{tx_id}] failed: {e}"
            )
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error in {self.contract.contract_name}.{function_name} [{tx_id}]: {e}",
                exc_info=True,
            )
            raise

        if commit:
            self.ledger.commit(stub.write_set, tx_id)
            logger.info(f"Transaction {self.contract.contract_name}.{function_name} committed [{tx_id}]")
        return result


__all__ = ["ContractRunner"]
