# jsonc

Building blocks for working with JSON: a growable byte buffer, an
insertion-ordered hash table with its string hash functions, number parsing
with C library prefix rules, the value and state helpers of an incremental
tokener, and RFC 6901 JSON Pointer access to parsed documents.

The package has no runtime dependencies.

## Installing

```
pip install .
```

## Modules

### `jsonc.pointer`: JSON Pointer

Works on documents made of Python `dict`, `list` and scalar values.

```python
from jsonc.pointer import json_pointer_get, json_pointer_getf, json_pointer_set

doc = {"foo": ["bar", "baz"], "a/b": 1}
json_pointer_get(doc, "/foo/0")          # "bar"
json_pointer_get(doc, "/a~1b")           # 1
json_pointer_getf(doc, "/foo/%d", 1)     # "baz"
doc = json_pointer_set(doc, "/foo/-", "qux")   # appends to the list
```

- `json_pointer_get(obj, path)` returns the referenced value. The empty path
  returns `obj` itself. A path not starting with `/` or a malformed array
  index (leading zero, non-digits) raises `ValueError`; a missing key raises
  `KeyError`; an index past the end raises `IndexError`.
- `json_pointer_set(obj, path, value)` stores `value` and returns the root:
  `value` itself for the empty path, otherwise `obj`, changed in place. `-`
  as the last segment appends to a list. The last segment is used as given,
  without `~0`/`~1` unescaping.
- `json_pointer_getf` and `json_pointer_setf` build the path as
  `path_fmt % args`.

### `jsonc.linkhash`: ordered hash table

`LinkHashTable` uses open addressing with linear probing, keeps its entries
on a doubly linked list in insertion order, and doubles its size once it is
`LOAD_FACTOR` (0.66) full. Duplicate keys are kept.

```python
from jsonc.linkhash import new_string_table

with new_string_table(16) as table:
    table.insert("a", 1)
    table.insert("b", 2)
    table.lookup("a")                          # 1
    [e.key for e in table]                     # ["a", "b"]
    table.delete("a")
    len(table)                                 # 1
```

- `new_string_table(size, free_fn=None)` compares keys as strings (up to the
  first NUL) and hashes them with the string hash selected when the table is
  created; `new_identity_table(size, free_fn=None)` compares and hashes by
  object identity.
- `insert` / `insert_with_hash` return the new `LinkHashEntry`;
  `lookup_entry` / `lookup_entry_with_hash` return an entry or `None`;
  `lookup` and `delete` raise `KeyError` for a missing key; `delete_entry`
  removes a given entry.
- `free_fn`, if given, is called on each entry when it is deleted and on
  every entry by `close()` (also called on leaving a `with` block).
- Iterating yields entries oldest first; deleting the current entry during
  iteration is safe.

### `jsonc.hashing`: hash functions

- `hashlittle(key, initval)`: the 32-bit lookup3 hash of a byte string.
- `perllike_str_hash(key)`: a simple multiplicative hash (`h * 33 + c`).
- `char_hash(key)`: `hashlittle` with a random per-process seed.
- `ptr_hash(key)`: a hash of the object's identity.
- `set_string_hash(kind)` chooses `StringHash.DEFAULT` or
  `StringHash.PERLLIKE` for tables created afterwards; other values raise
  `ValueError`. `current_string_hash()` returns the selected function.

### `jsonc.numparse`: number parsing

Leading whitespace is skipped and trailing characters are ignored, as with
the C library conversions. Each raises `ValueError` when no number is found.

- `parse_int64(text)`: base-10 integer clamped to the signed 64-bit range.
- `parse_uint64(text)`: base-10 integer clamped to 64 bits; a leading `-`
  raises `ValueError`.
- `parse_double(text)`: decimal or hexadecimal float, `inf`/`infinity` and
  `nan`.

### `jsonc.tokstate`: tokener helpers

- `State`: the states of an incremental JSON tokener; `StackFrame`: one
  nesting level (state, saved state, value under construction, field name).
- `Utf8Validator`: feed it bytes one at a time; `feed` returns `False` on a
  malformed sequence and `pending()` tells how many continuation bytes are
  still expected.
- `is_high_surrogate`, `is_low_surrogate`, `decode_surrogate_pair` and
  `encode_codepoint`, which turns a code point into UTF-8 and lone surrogates
  or values beyond U+10FFFF into U+FFFD.
- `number_value(text, is_double, strict)`: turns collected number text into
  an `int` or `float`. Outside strict mode trailing `e`, `E`, `+`, `-` are
  dropped from a double (`"123e+"` gives `123.0`); in strict mode a non-zero
  integer with a leading `0` raises `ValueError`.

### `jsonc.printbuf`: byte buffer

`PrintBuf` accumulates bytes (text is stored UTF-8 encoded): `append(data)`
returns the number of bytes added, `sprintf(fmt, *args)` appends
`fmt % args`, `memset(offset, charvalue, length)` fills a range (an offset of
-1 means the end, growing the buffer as needed), `reset()` empties it, and
`len()` and `bytes()` give its size and content.

## What the package does not do

The package holds the parts that a JSON tokener is built from, but no
tokener that turns JSON text into values: there is no parse function, no
reading of JSON from files or file descriptors, no writing of JSON, and no
tree walker. `jsonc.pointer` works on documents you have already parsed,
for example with the standard library's `json.loads`. There is no command
line program.

## Running the tests

```
pip install .[test]
pytest
```