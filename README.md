# diligent

Building blocks for benchmarking SQL databases. It generates table data that
can be reproduced and builds SQL statements for that data. It also records
benchmark metrics in the Prometheus text format.

It runs on Python 3.10 and later and needs nothing outside the standard
library. To install it with the test tools:

    pip install diligent[test]

## Modules

### `diligent.dataspec`

A `DataSpec` describes a table of records whose keys can be generated again
and again.

- `new_spec(record_count, record_size)` builds a random spec.
  - The record count is rounded down so that it splits into three key levels.
    See `compute_num_sub_keys_per_level`: 1005 becomes 1000, and 55 becomes
    50.
  - A count below 1 raises `ValueError`.
- `DataSpec.is_valid()` checks a spec.
- `DataSpec.to_json()` returns the spec as indented JSON.
- `DataSpec.save_to_file(file_name)` writes the spec to a new file. If the file
  already exists it raises `FileExistsError`.
- `load_spec_from_file(file_name)` reads a spec back. If the file does not hold
  a valid spec it raises `ValueError`.

### `diligent.datagen`

`DataGen(spec)` produces `Record` objects by index. Each record has these
fields:

- `pk`, the primary key;
- `uniq`, a unique key, which is `pk` translated character for character;
- `small_grp` and `large_grp`, the translated prefixes of the key;
- `fixed_value`;
- `seq_num`, a sequence number that counts up from 1 and is thread safe;
- `time_stamp`, the current Unix time;
- `payload`, a random payload sized to pad the record to `record_size`.

`DataGen` also exposes the individual fields through `key(n)`, `uniq(n)`,
`small_grp(n)`, `large_grp(n)`, `fixed_value()` and `random_payload()`. The
total count comes from `num_records()`.

### `diligent.keyspec` and `diligent.keygen`

These modules build leveled keys such as `ABCDE_FGHIJ_KLMNO`.

`LeveledKeyGenSpec` holds one set of sub-keys for each level. Two functions
build one:

- `new_leveled_keygen_spec(sub_key_sets)`;
- `new_random_leveled_keygen_spec(sizes, sub_key_len)`.

`LeveledKeyGen(spec)` works from a spec:

- `key(n)` returns the `n`-th `LeveledKey` directly.
- `all_keys()` lists every key, in the same order as `key(n)`.
- Keys that share a prefix at one level form a contiguous block.
  `block_size_at_level(n)` gives the size of that block.
- `LeveledKey.prefix(level)` returns the key up to and including that level.

### `diligent.sqlgen`

`SqlGen(table, dg)` returns SQL text as plain strings:

- `insert_statement(n)`;
- `select_by_pk_statement(n)`;
- `select_by_uk_statement(n)`;
- `update_payload_by_pk_statement(n)`;
- `delete_by_pk_statement(n)`.

### `diligent.intgen`

- `partition(n, p)` splits `n` into at most `p` parts of nearly equal size,
  with the larger parts first. For example, `partition(6, 4) == [2, 2, 1, 1]`.
- `IntRange(start, limit)` is a half-open range. It provides:
  - `ints()`;
  - `rand()`;
  - `partition(p)`, which splits it into contiguous sub-ranges;
  - `duplicate(n)`.
- `shuffle(values)` shuffles a list in place.

### `diligent.metrics`

`DiligentMetrics(metrics_addr)` keeps these metrics in memory:

- histograms of statement and transaction durations;
- counters of failed statements;
- counters of statements where the number of affected rows did not match;
- gauges for the configured transaction mode, batch size and concurrency;
- a gauge for the number of active workers;
- gauges for the connection pool.

The metrics can be read out in two ways:

- `exposition()` renders them in the Prometheus text format.
- `register()` serves them at `/metrics` on `metrics_addr`, written as
  `"host:port"`, from a background thread. It returns the host and port it
  bound to. `close()` stops the server.

### Smaller helpers

- `diligent.strgen.StrGen` generates random strings over a character set,
  including sets of unique strings.
- `diligent.strtr` provides `TrSpec` and `Tr`, which translate strings
  character for character.
- `diligent.charset` holds the character sets.
- `diligent.idgen.generate_id16()` returns a 16-character hexadecimal id based
  on the current time.
- `diligent.buildinfo` holds build metadata.

## Example

```python
from diligent.dataspec import new_spec
from diligent.datagen import DataGen
from diligent.sqlgen import SqlGen

spec = new_spec(1000, 1024)
dg = DataGen(spec)
sql = SqlGen("bench", dg)

print(dg.num_records())          # 1000
print(sql.insert_statement(0))
print(sql.select_by_pk_statement(0))
```

## What it does not do

The package does not connect to a database and does not run workloads.

- It only builds SQL statements as strings. Running them, timing them and
  feeding the results into `DiligentMetrics` is left to your own code.
- There are no worker threads, no workload scheduling and no command-line
  program.
- The `diligent.work` package is empty.

## Running the tests

    pytest