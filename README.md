# redditchain

`redditchain` is a small in-memory state module for a message board. It keeps three collections:

- **users**
- **subreddits**
- **posts**

Every entry is keyed by a 32-byte address derived with SHA-256. The package has no runtime dependencies.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Addresses

`redditchain.address` defines `Address`, an immutable 32-byte value. A value of any other length raises `ValueError`, and an integer raises `TypeError`. `str(address)` gives `0x` followed by the hex digits. `bytes(address)` gives the raw bytes. `Address.from_hex(text)` parses hex text, with or without a `0x` prefix.

There are four typed subclasses: `UserAddress`, `SubAddress`, `PostAddress` and `CommentAddress`. Three functions derive them:

- `get_user_address(name, sender)` hashes the sender's bytes followed by the UTF-8 user name.
- `get_sub_address(subname)` hashes the subreddit name, so each name maps to exactly one address.
- `get_post_address(user_address, sub_address)` hashes both addresses with a fresh random UUID, so every call gives a new address.

## Using the module

```python
from redditchain.module import Reddit, Context, CreateUser, CreateSubReddit, CreatePost
from redditchain.address import Address

reddit = Reddit()
sender = Address(bytes(32))
ctx = Context(sender)

reddit.call(CreateUser(username="alice"), ctx)
reddit.call(
    CreateSubReddit(user_address=sender, subname="python", description="All things Python"),
    ctx,
)

sub = reddit.get_sub_address("python").sub_address
reddit.call(CreatePost(title="Hello", flair="intro", content="First post", subaddress=sub), ctx)

print(reddit.get_sub_reddit(sub))
```

`Reddit.call(msg, context)` accepts the following messages:

- **`CreateUser`** stores the user under `get_user_address(username, context.sender)`.
- **`CreateSubReddit`** stores the subreddit under `get_sub_address(subname)`. Its only moderator is `context.sender`. The message's `user_address` field is not used.
- **`CreatePost`** stores a new post with status `PostStatus.ACTIVE` under a fresh post address.

Any other message raises `TypeError`.

`Reddit.genesis(config)` accepts a `RedditConfig` and does nothing else. Any other value raises `TypeError`.

`Reddit.pre_dispatch_tx_hook(public_key)` returns the `Address` formed from the SHA-256 digest of the key bytes. `Reddit.post_dispatch_tx_hook(context)` checks that it was given a `Context`.

### Errors

Creating a user or subreddit that already exists raises `RedditError`. Looking up an address that is not stored also raises `RedditError`.

### Queries

| Query | Returns |
| --- | --- |
| `get_user(user_address)` | `UserCollectionResponse` (username and the address it is stored under) |
| `get_user_address(user_address, username)` | `UserAddressResponse` |
| `get_sub_reddit(sub_address)` | `SubRedditCollectionResponse` (name, description, address, moderators) |
| `get_sub_address(subname)` | `SubAddressResponse` |
| `get_post(post_address)` | `PostCollectionResponse` |

`get_user_address` and `get_sub_address` only compute addresses; they do not check that anything is stored there.

## Models

`redditchain.models` holds the stored records, which are frozen dataclasses:

- `User`: username, karma (starts at 0), and the creator's address
- `SubReddit`
- `Post`

Each record has a `create` classmethod that returns a `(key, record)` pair. `User.create` and `SubReddit.create` take the existing collection. If the key is already present, they raise `DuplicateEntryError`.

`PostStatus` has the values `ACTIVE`, `ARCHIVED` and `DELETED`.

## State-change notifications

`redditchain.offchain` describes a change with `RedditStateChanges`. Its fields are:

- `state`: a `RedditCollections` value, one of `USER`, `SUBREDDIT` or `POST`
- `change`
- `address`
- `change_type`: a `ChangeType` value, either `CREATED` or `UPDATED`

Building either enum from an unknown string raises `ValueError`.

`RedditStateChanges.to_json()` renders the change as JSON indented by two spaces.

`publish_state(body, url)` sends that JSON as an HTTP POST on a daemon thread, with a 30-second timeout. Network errors are ignored. The function returns the thread, so you can `join()` it to wait for delivery.

`Reddit.call` does not publish anything by itself.

## Configuration

`redditchain.config` provides two constants: `ROLLUP_NAMESPACE_RAW` and `SEQUENCER_DA_ADDRESS`.

`GenesisPaths.from_dir(directory)` builds the paths of three files in a genesis directory:

- `accounts.json`
- `bank.json`
- `sequencer_registry.json`

It does not read or validate these files.

## What this package does not do

The module state lives in plain dictionaries in memory; nothing is persisted. There is no node, RPC server, command-line wallet or transaction signature checking. There is also no batching, no gas accounting, and no loading of genesis data. Callers supply the sender in a `Context` and drive the module directly.