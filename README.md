# hfkit

Building blocks for programs that fetch files from the HuggingFace Hub and
keep them in the cache layout shared with other hub clients (usually
`~/.cache/huggingface/hub`):

- `hfkit.downloader`: HTTP downloads and HEAD requests with progress
  callbacks, cancellation and a shared limit on parallel transfers;
- `hfkit.semaphore`: a counting semaphore whose capacity can change at run time;
- `hfkit.hubconfig`: cache location, user agent, repository types and header names;
- `hfkit.cachepaths`: safe relative paths, relative symbolic links and file
  metadata read from response headers;
- `hfkit.repoinfo`: parsing of the repository description served by the hub API;
- `hfkit.tokenizer_config`: parsing of `tokenizer_config.json` files;
- `hfkit.tokenizer_api`: the special-token enumeration and the tokenizer interface;
- `hfkit.fileutils`: existence checks and `~` / `~user` expansion.

## Installation

```
pip install hfkit
```

To run the test suite, install the `test` extra:

```
pip install "hfkit[test]"
pytest
```

## Downloading

```python
import threading

from hfkit.downloader import Manager
from hfkit.hubconfig import default_http_user_agent

manager = (
    Manager()
    .max_parallel(4)
    .with_auth_token("token")
    .with_user_agent(default_http_user_agent())
)

headers, size = manager.fetch_header("https://huggingface.co/some/file")

cancel = threading.Event()
manager.download(
    "https://huggingface.co/some/file",
    "~/downloads/file",
    callback=lambda done, total: print(done, total),
    cancel_event=cancel,
)
```

- A `Manager` allows 20 transfers at once by default; `max_parallel(n)` changes
  that, and `n <= 0` removes the limit. One manager can be shared between
  threads so they all obey the same limit.
- `with_auth_token` sends `Authorization: Bearer <token>`; an empty token
  sends nothing.
- `download` creates the target's directory, expands a leading `~`, and calls
  the callback with `(downloaded_bytes, total_bytes)`, first with 0 downloaded
  and then after every chunk. The total is -1 when the server does not report it.
- `fetch_header` sends a HEAD request, following redirects, and returns the
  response headers and content length (-1 if unknown).
- Failures raise `DownloadError`; setting the cancel event makes a transfer
  raise `DownloadCancelledError`, a subclass of `DownloadError`.

`hfkit.semaphore.Semaphore(capacity)` is the limit used by the manager. It can
be used on its own, with `acquire`/`release` or as a context manager, and
`resize(n)` changes its capacity without affecting current holders.

## Cache layout helpers

```python
from hfkit.cachepaths import clean_relative_file_path, create_symlink, extract_file_metadata
from hfkit.hubconfig import default_cache_dir, RepoType

default_cache_dir()                          # $XDG_CACHE_HOME/huggingface/hub or $HOME/.cache/huggingface/hub
clean_relative_file_path("../foo/./bar")     # "foo/bar"
clean_relative_file_path("..")               # "."
metadata = extract_file_metadata(headers, url, size)
metadata.etag, metadata.commit_hash, metadata.location, metadata.size
create_symlink("snapshots/abc/README.md", "blobs/d7edf6")  # relative link, replacing any existing file
```

`extract_file_metadata` reads `X-Repo-Commit`, `X-Linked-Etag` (falling back
to `ETag`, with quotes removed), `Location` (falling back to the given URL) and
`X-Linked-Size` (falling back to the given content length). Header names are
matched without regard to case.

`RepoType` has the members `MODEL`, `DATASET` and `SPACE`, whose values are
the path segments the hub uses (`models`, `datasets`, `spaces`).
`REPO_ID_SEPARATOR` (`--`) joins the type and name parts into a cache folder name.

## Repository info

```python
from hfkit.repoinfo import RepoInfo

info = RepoInfo.from_json(response_bytes)
info.commit_hash
[sibling.name for sibling in info.siblings]
info.safetensors.total, info.safetensors.parameters
```

Missing fields take empty defaults; fields of the wrong type raise `ValueError`.

## Tokenizer configuration

```python
from hfkit.tokenizer_config import parse_config_file

config = parse_config_file(path_to_tokenizer_config_json)
print(config.tokenizer_class, config.bos_token, config.eos_token)
```

`parse_config_content` parses JSON text or bytes directly. Invalid JSON, or a
field of the wrong type, raises `ValueError`. Keys of `added_tokens_decoder`
become integers.

`hfkit.tokenizer_api.SpecialToken` lists the common special tokens: beginning
and end of sentence, unknown, pad, mask and classification. `str(token)` gives
its snake-case name, and `SpecialToken.from_name("pad")` looks one up,
ignoring case. `special_token_strings()` returns all names in order.
`hfkit.tokenizer_api.Tokenizer` is an abstract base class with `encode`,
`decode` and `special_token_id`; the package ships no concrete tokenizer.

## What this package does not do

There is no repository object here: nothing lists a repository's files,
resolves a revision to a commit, or downloads files into the cache's
`blobs/` and `snapshots/` folders on its own. Nor is there locking between
processes that download the same file at once. The modules above provide the
pieces such a client is built from; putting them together is left to the caller.