# dpsapi

`dpsapi` defines the request and response messages for reading an indexed
execution state by block height. It also has two adapters built on those
messages:

- `dpsapi.index.Index` is an index reader backed by an API client. You create
  one with `index_from_api(client, codec)`. It sends request messages to the
  client and decodes the returned payloads with `codec.unmarshal`. It returns
  heights, state commitments, headers, register values, collections,
  guarantees, transactions, results, events and seals. Lists of IDs come back
  as 32-byte identifiers.
- `dpsapi.server.Server` answers the same requests from any index reader.
  Before it asks the reader, it validates each request that carries
  identifiers, paths or a height. It encodes entities with `codec.marshal`.

Both adapters raise `dpsapi.messages.ApiError` when the backend call fails or
when decoding or encoding fails. The server raises `BadRequest`, a subclass of
`ApiError`, when a request breaks its rules. Two examples are an identifier
that is not 32 bytes long and a register-values request with no paths. The
server also raises `ApiError` when a register path is not 32 bytes long.

## Installation

```
pip install .
```

## Usage

A client is any object with one method per API call: `get_first`,
`get_last`, `get_height_for_block`, `get_commit`, `get_header`,
`get_events`, `get_register_values`, `get_collection`,
`list_collections_for_height`, `get_guarantee`, `get_transaction`,
`get_height_for_transaction`, `list_transactions_for_height`, `get_result`,
`get_seal` and `list_seals_for_height`. Each method takes the matching
request message and returns the matching response message. A `Server` has
exactly these methods, so it can serve as the client itself:

```python
from dpsapi.index import index_from_api
from dpsapi.server import Server

# reader: any object with first(), last(), header(height), events(height, *types), ...
# codec: any object with marshal(value) -> bytes and unmarshal(data) -> value
server = Server(reader, codec)
index = index_from_api(server, codec)

first = index.first()
header = index.header(first)
events = index.events(first, "A.0x1.Token.Deposited")
```

`dpsapi.messages` holds the message dataclasses (for example
`GetHeaderRequest` and `GetHeaderResponse`) and these helpers:

- `validate(request)` checks a request against its field rules and returns
  it. It raises `BadRequest` when a rule is broken.
- `hash_to_id(data)` turns bytes into a 32-byte identifier. Longer input is
  truncated and shorter input is padded with zero bytes.
- `to_commit(data)` returns a state commitment. It raises `ValueError` unless
  `data` is exactly 32 bytes long.
- `bytes_to_paths(raw)` returns ledger paths. It raises `ValueError` unless
  every item is exactly 32 bytes long.

## What the package does not do

The package has no storage of its own and no network transport. It provides
no codec and no server process. You supply the index reader, the codec and
the client, or you connect a `Server` to an `Index` directly as shown above.

## Running the tests

```
pip install .[test]
pytest
```