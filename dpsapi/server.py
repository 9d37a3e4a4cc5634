"""API server that answers DPS requests from an index reader."""

from __future__ import annotations

from .messages import (
    ApiError,
    BadRequest,
    GetCollectionResponse,
    GetCommitResponse,
    GetEventsResponse,
    GetFirstResponse,
    GetGuaranteeResponse,
    GetHeaderResponse,
    GetHeightForBlockResponse,
    GetHeightForTransactionResponse,
    GetLastResponse,
    GetRegisterValuesResponse,
    GetResultResponse,
    GetSealResponse,
    GetTransactionResponse,
    ListCollectionsForHeightResponse,
    ListSealsForHeightResponse,
    ListTransactionsForHeightResponse,
    bytes_to_paths,
    hash_to_id,
    validate,
)


class Server:
    """Serves API calls using an index reader as the data backend.

    The reader may be an on-disk index or another remote index. The codec has a
    ``marshal`` method used to encode the entities placed in responses.
    """

    def __init__(self, index, codec=None):
        self.index = index
        self.codec = codec

    @staticmethod
    def _check(request):
        try:
            validate(request)
        except BadRequest as err:
            raise BadRequest(f"bad request: {err}") from err

    @staticmethod
    def _fetch(action, func, *args):
        try:
            return func(*args)
        except Exception as err:
            raise ApiError(f"could not {action}: {err}") from err

    def _encode(self, what, value):
        try:
            return self.codec.marshal(value)
        except Exception as err:
            raise ApiError(f"could not encode {what}: {err}") from err

    def get_first(self, request):
        """Answer with the height of the first indexed block."""
        height = self._fetch("get first height", self.index.first)
        return GetFirstResponse(height=height)

    def get_last(self, request):
        """Answer with the height of the last indexed block."""
        height = self._fetch("get last height", self.index.last)
        return GetLastResponse(height=height)

    def get_height_for_block(self, request):
        """Answer with the height of the requested block."""
        self._check(request)
        block_id = hash_to_id(request.block_id)
        height = self._fetch(
            "get height for block", self.index.height_for_block, block_id
        )
        return GetHeightForBlockResponse(block_id=request.block_id, height=height)

    def get_commit(self, request):
        """Answer with the state commitment at the requested height."""
        self._check(request)
        commit = self._fetch("get commit", self.index.commit, request.height)
        return GetCommitResponse(height=request.height, commit=bytes(commit))

    def get_header(self, request):
        """Answer with the encoded header at the requested height."""
        self._check(request)
        header = self._fetch("get header", self.index.header, request.height)
        data = self._encode("header", header)
        return GetHeaderResponse(height=request.height, data=data)

    def get_events(self, request):
        """Answer with the encoded events at the requested height and types."""
        events = self._fetch(
            "get events", self.index.events, request.height, *request.types
        )
        data = self._encode("events", events)
        return GetEventsResponse(
            height=request.height, types=request.types, data=data
        )

    def get_register_values(self, request):
        """Answer with the register values at the requested paths and height."""
        self._check(request)
        try:
            paths = bytes_to_paths(request.paths)
        except ValueError as err:
            raise ApiError(f"could not convert paths: {err}") from err
        values = self._fetch(
            "retrieve values", self.index.values, request.height, paths
        )
        return GetRegisterValuesResponse(
            height=request.height,
            paths=request.paths,
            values=[bytes(value) for value in values],
        )

    def get_collection(self, request):
        """Answer with the encoded collection of the requested ID."""
        self._check(request)
        coll_id = hash_to_id(request.collection_id)
        collection = self._fetch(
            "retrieve collection", self.index.collection, coll_id
        )
        data = self._encode("collection", collection)
        return GetCollectionResponse(collection_id=request.collection_id, data=data)

    def list_collections_for_height(self, request):
        """Answer with the collection IDs at the requested height."""
        self._check(request)
        coll_ids = self._fetch(
            "list collections by height",
            self.index.collections_by_height,
            request.height,
        )
        return ListCollectionsForHeightResponse(
            height=request.height,
            collection_ids=[bytes(coll_id) for coll_id in coll_ids],
        )

    def get_guarantee(self, request):
        """Answer with the encoded guarantee of the requested collection."""
        self._check(request)
        coll_id = hash_to_id(request.collection_id)
        guarantee = self._fetch("retrieve guarantee", self.index.guarantee, coll_id)
        data = self._encode("guarantee", guarantee)
        return GetGuaranteeResponse(collection_id=request.collection_id, data=data)

    def get_transaction(self, request):
        """Answer with the encoded transaction of the requested ID."""
        self._check(request)
        tx_id = hash_to_id(request.transaction_id)
        transaction = self._fetch(
            "retrieve transaction", self.index.transaction, tx_id
        )
        data = self._encode("transaction", transaction)
        return GetTransactionResponse(
            transaction_id=request.transaction_id, data=data
        )

    def get_height_for_transaction(self, request):
        """Answer with the height of the block holding the requested transaction."""
        self._check(request)
        tx_id = hash_to_id(request.transaction_id)
        height = self._fetch(
            "get height for transaction", self.index.height_for_transaction, tx_id
        )
        return GetHeightForTransactionResponse(
            transaction_id=request.transaction_id, height=height
        )

    def list_transactions_for_height(self, request):
        """Answer with the transaction IDs at the requested height."""
        self._check(request)
        tx_ids = self._fetch(
            "list transactions by height",
            self.index.transactions_by_height,
            request.height,
        )
        return ListTransactionsForHeightResponse(
            height=request.height,
            transaction_ids=[bytes(tx_id) for tx_id in tx_ids],
        )

    def get_result(self, request):
        """Answer with the encoded result of the requested transaction."""
        self._check(request)
        tx_id = hash_to_id(request.transaction_id)
        result = self._fetch("retrieve transaction result", self.index.result, tx_id)
        data = self._encode("transaction result", result)
        return GetResultResponse(transaction_id=request.transaction_id, data=data)

    def get_seal(self, request):
        """Answer with the encoded seal of the requested ID."""
        self._check(request)
        seal_id = hash_to_id(request.seal_id)
        seal = self._fetch("retrieve seal", self.index.seal, seal_id)
        data = self._encode("seal", seal)
        return GetSealResponse(seal_id=request.seal_id, data=data)

    def list_seals_for_height(self, request):
        """Answer with the seal IDs at the requested height."""
        self._check(request)
        seal_ids = self._fetch(
            "list seals by height", self.index.seals_by_height, request.height
        )
        return ListSealsForHeightResponse(
            height=request.height,
            seal_ids=[bytes(seal_id) for seal_id in seal_ids],
        )