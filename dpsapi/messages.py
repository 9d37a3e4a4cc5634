"""Request and response messages of the DPS API, with their validation rules."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass

IDENTIFIER_SIZE = 32
PATH_SIZE = 32
COMMIT_SIZE = 32


class ApiError(Exception):
    """Raised when an API call, or the decoding of its result, fails."""


class BadRequest(ApiError):
    """Raised when a request does not satisfy its validation rules."""


def _identifier():
    return field(default=b"", metadata={"length": IDENTIFIER_SIZE})


def _required_list():
    return field(default_factory=list, metadata={"min_items": 1})


@dataclass
class GetFirstRequest:
    pass


@dataclass
class GetFirstResponse:
    height: int = 0


@dataclass
class GetLastRequest:
    pass


@dataclass
class GetLastResponse:
    height: int = 0


@dataclass
class GetHeightForBlockRequest:
    block_id: bytes = _identifier()


@dataclass
class GetHeightForBlockResponse:
    block_id: bytes = b""
    height: int = 0


@dataclass
class GetCommitRequest:
    height: int = 0


@dataclass
class GetCommitResponse:
    height: int = 0
    commit: bytes = b""


@dataclass
class GetHeaderRequest:
    height: int = 0


@dataclass
class GetHeaderResponse:
    height: int = 0
    data: bytes = b""


@dataclass
class GetEventsRequest:
    height: int = 0
    types: list[str] = field(default_factory=list)


@dataclass
class GetEventsResponse:
    height: int = 0
    types: list[str] = field(default_factory=list)
    data: bytes = b""


@dataclass
class GetRegisterValuesRequest:
    height: int = 0
    paths: list[bytes] = _required_list()


@dataclass
class GetRegisterValuesResponse:
    height: int = 0
    paths: list[bytes] = field(default_factory=list)
    values: list[bytes] = field(default_factory=list)


@dataclass
class GetCollectionRequest:
    collection_id: bytes = _identifier()


@dataclass
class GetCollectionResponse:
    collection_id: bytes = b""
    data: bytes = b""


@dataclass
class ListCollectionsForHeightRequest:
    height: int = 0


@dataclass
class ListCollectionsForHeightResponse:
    height: int = 0
    collection_ids: list[bytes] = field(default_factory=list)


@dataclass
class GetGuaranteeRequest:
    collection_id: bytes = _identifier()


@dataclass
class GetGuaranteeResponse:
    collection_id: bytes = b""
    data: bytes = b""


@dataclass
class GetTransactionRequest:
    transaction_id: bytes = _identifier()


@dataclass
class GetTransactionResponse:
    transaction_id: bytes = b""
    data: bytes = b""


@dataclass
class GetHeightForTransactionRequest:
    transaction_id: bytes = _identifier()


@dataclass
class GetHeightForTransactionResponse:
    transaction_id: bytes = b""
    height: int = 0


@dataclass
class ListTransactionsForHeightRequest:
    height: int = 0


@dataclass
class ListTransactionsForHeightResponse:
    height: int = 0
    transaction_ids: list[bytes] = field(default_factory=list)


@dataclass
class GetResultRequest:
    transaction_id: bytes = _identifier()


@dataclass
class GetResultResponse:
    transaction_id: bytes = b""
    data: bytes = b""


@dataclass
class GetSealRequest:
    seal_id: bytes = _identifier()


@dataclass
class GetSealResponse:
    seal_id: bytes = b""
    data: bytes = b""


@dataclass
class ListSealsForHeightRequest:
    height: int = 0


@dataclass
class ListSealsForHeightResponse:
    height: int = 0
    seal_ids: list[bytes] = field(default_factory=list)


def validate(request):
    """Check a request against its field rules and return it unchanged.

    Raises BadRequest when a rule is broken.
    """
    if not is_dataclass(request) or isinstance(request, type):
        raise TypeError(f"not a request message: {request!r}")
    name = type(request).__name__
    for spec in fields(request):
        value = getattr(request, spec.name)
        length = spec.metadata.get("length")
        if length is not None and len(value) != length:
            raise BadRequest(
                f"{name}.{spec.name}: expected {length} bytes, got {len(value)}"
            )
        min_items = spec.metadata.get("min_items")
        if min_items is not None and len(value) < min_items:
            raise BadRequest(
                f"{name}.{spec.name}: expected at least {min_items} items, got {len(value)}"
            )
    return request


def hash_to_id(data):
    """Turn raw bytes into a fixed-size identifier, truncating or zero-padding."""
    return bytes(data[:IDENTIFIER_SIZE]).ljust(IDENTIFIER_SIZE, b"\x00")


def to_commit(data):
    """Turn raw bytes into a state commitment; the length must be exact."""
    if len(data) != COMMIT_SIZE:
        raise ValueError(f"expecting {COMMIT_SIZE} bytes but got {len(data)} bytes")
    return bytes(data)


def bytes_to_paths(raw):
    """Turn raw byte strings into ledger paths; every length must be exact."""
    paths = []
    for item in raw:
        if len(item) != PATH_SIZE:
            raise ValueError(
                f"invalid path length: expected {PATH_SIZE} bytes, got {len(item)}"
            )
        paths.append(bytes(item))
    return paths