"""Index reader that fetches its data through a DPS API client."""

from __future__ import annotations

from .messages import (
    ApiError,
    GetCollectionRequest,
    GetCommitRequest,
    GetEventsRequest,
    GetFirstRequest,
    GetGuaranteeRequest,
    GetHeaderRequest,
    GetHeightForBlockRequest,
    GetHeightForTransactionRequest,
    GetLastRequest,
    GetRegisterValuesRequest,
    GetResultRequest,
    GetSealRequest,
    GetTransactionRequest,
    ListCollectionsForHeightRequest,
    ListSealsForHeightRequest,
    ListTransactionsForHeightRequest,
    hash_to_id,
    to_commit,
)


class Index:
    """Reads indexed data from a remote API instead of an on-disk database.

    The client exposes one method per API call, taking a request message and
    returning a response message. The codec has ``marshal`` and ``unmarshal``
    methods for the encoded payloads.
    """

    def __init__(self, client, codec=None):
        self.client = client
        self.codec = codec

    def _call(self, action, method, request):
        try:
            return method(request)
        except Exception as err:
            raise ApiError(f"could not {action}: {err}") from err

    def _decode(self, what, data):
        try:
            return self.codec.unmarshal(data)
        except Exception as err:
            raise ApiError(f"could not decode {what}: {err}") from err

    def first(self):
        """Return the height of the first indexed finalized block."""
        res = self._call("get first height", self.client.get_first, GetFirstRequest())
        return res.height

    def last(self):
        """Return the height of the last indexed finalized block."""
        res = self._call("get last height", self.client.get_last, GetLastRequest())
        return res.height

    def height_for_block(self, block_id):
        """Return the height of the block with the given ID."""
        req = GetHeightForBlockRequest(block_id=bytes(block_id))
        res = self._call("get height", self.client.get_height_for_block, req)
        return res.height

    def commit(self, height):
        """Return the state commitment after the block at the given height."""
        req = GetCommitRequest(height=height)
        res = self._call("get commit", self.client.get_commit, req)
        try:
            return to_commit(res.commit)
        except ValueError as err:
            raise ApiError(f"could not convert commit: {err}") from err

    def header(self, height):
        """Return the header of the finalized block at the given height."""
        req = GetHeaderRequest(height=height)
        res = self._call("get header", self.client.get_header, req)
        return self._decode("header", res.data)

    def values(self, height, paths):
        """Return the ledger values at the given paths and height.

        A path absent from the index yields an empty value rather than an error.
        """
        req = GetRegisterValuesRequest(height=height, paths=[bytes(p) for p in paths])
        res = self._call("get registers", self.client.get_register_values, req)
        return [bytes(value) for value in res.values]

    def collection(self, coll_id):
        """Return the collection with the given ID."""
        req = GetCollectionRequest(collection_id=bytes(coll_id))
        res = self._call("get collection", self.client.get_collection, req)
        return self._decode("collection", res.data)

    def collections_by_height(self, height):
        """Return the collection IDs within the block at the given height."""
        req = ListCollectionsForHeightRequest(height=height)
        res = self._call("get collections", self.client.list_collections_for_height, req)
        return [hash_to_id(raw) for raw in res.collection_ids]

    def guarantee(self, coll_id):
        """Return the collection guarantee for the given collection ID."""
        req = GetGuaranteeRequest(collection_id=bytes(coll_id))
        res = self._call("get guarantee", self.client.get_guarantee, req)
        return self._decode("guarantee", res.data)

    def transaction(self, tx_id):
        """Return the transaction with the given ID."""
        req = GetTransactionRequest(transaction_id=bytes(tx_id))
        res = self._call("get transaction", self.client.get_transaction, req)
        return self._decode("transaction", res.data)

    def height_for_transaction(self, tx_id):
        """Return the height of the block holding the given transaction."""
        req = GetHeightForTransactionRequest(transaction_id=bytes(tx_id))
        res = self._call("get height", self.client.get_height_for_transaction, req)
        return res.height

    def transactions_by_height(self, height):
        """Return the transaction IDs within the block at the given height."""
        req = ListTransactionsForHeightRequest(height=height)
        res = self._call(
            "get transactions", self.client.list_transactions_for_height, req
        )
        return [hash_to_id(raw) for raw in res.transaction_ids]

    def result(self, tx_id):
        """Return the result of the given transaction."""
        req = GetResultRequest(transaction_id=bytes(tx_id))
        res = self._call("get transaction result", self.client.get_result, req)
        return self._decode("transaction result", res.data)

    def events(self, height, *args):
        """Return the events at the given height, optionally only of the given types."""
        req = GetEventsRequest(height=height, types=[str(t) for t in args])
        res = self._call("get events", self.client.get_events, req)
        return self._decode("events", res.data)

    def seal(self, seal_id):
        """Return the seal with the given ID."""
        req = GetSealRequest(seal_id=bytes(seal_id))
        res = self._call("get seal", self.client.get_seal, req)
        return self._decode("seal", res.data)

    def seals_by_height(self, height):
        """Return the seal IDs at the given height."""
        req = ListSealsForHeightRequest(height=height)
        res = self._call("get seals", self.client.list_seals_for_height, req)
        return [hash_to_id(raw) for raw in res.seal_ids]


def index_from_api(client, codec):
    """Create an index reader that retrieves its data through the given client."""
    return Index(client, codec)