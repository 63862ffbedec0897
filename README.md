# mongr8

mongr8 helps manage MongoDB schema changes. You describe your
collections in Python: their metadata, fields and indexes. mongr8
checks those definitions for mistakes, turns them into typed sample
documents and index documents, inspects the collection and migration
files of a project, and runs the project's migration programs from the
command line.

## Installation

```
pip install mongr8
```

To run the test suite:

```
pip install "mongr8[test]"
pytest
```

## Describing a collection

```python
from mongr8.collection import Collection
from mongr8.fields import (
    array_field,
    int32_field,
    object_field,
    string_field,
    timestamp_field,
)
from mongr8.indexes import compound_index, field, single_field_index
from mongr8.metadata import init_metadata

users = Collection(
    init_metadata("users"),
    [
        string_field("_id"),
        string_field("email"),
        object_field("profile", string_field("name"), int32_field("age")),
        array_field("tags", string_field("")),
        timestamp_field("updated_at"),
    ],
    [
        single_field_index(field("email", 1)).as_unique(),
        compound_index(field("profile.name", 1), field("updated_at", -1)),
    ],
)
```

`mongr8.fields` has builders for strings, 32 and 64 bit integers,
doubles, booleans, arrays (at most one item type), embedded objects,
timestamps, every GeoJSON shape and legacy coordinates
(`legacy_coordinate_array_field`, and
`legacy_coordinate_embedded_doc_field` with `set_coordinate_x` /
`set_coordinate_y`). A field can be made nullable with `set_nullable()`
and carry extra information with `set_extra(FieldExtra.DROP, True)`.
`mongr8.collection.field_from_type` builds a childless field from a
`FieldType`.

`mongr8.metadata.Metadata` supports capped collections (`capped(size)`),
a TTL (`ttl(seconds)`) and views (`as_view()`).

`mongr8.indexes` builds single field, compound, text, 2dsphere, hashed
or raw indexes. Options are chained on the index: `as_sparse()`,
`as_background()`, `as_unique()`, `as_hidden()`,
`set_partial_expression(...)`, `set_ttl(...)`, `set_collation(...)` and
`set_custom_name(...)`. `IndexSpec.index_name()` gives the custom name
or one derived from keys and options; `IndexSpec.key()` identifies the
whole structure.

## Validating definitions

```python
from mongr8.validation import Validation, ValidationError

try:
    Validation([users]).validate()
except ValidationError as exc:
    print(f"invalid schema: {exc}")
```

Validation rejects duplicate collection names and the reserved name
`mongr8_migration_history`, `_id` fields that are not an integer,
double or string, duplicate sibling field names, empty field names
(outside array items), names longer than 128 characters, arrays without
exactly one item type, objects without children, duplicate indexes,
index and partial-filter keys that name no field, and TTL indexes
without a timestamp field. Each check is also available on its own
(`validate_fields`, `validate_indexes` and so on).

## Translating definitions

`mongr8.field_translation.translate_field(spec).object()` renders a field
as `{name: placeholder}`, recursing into arrays and objects and building
GeoJSON shapes. `mongr8.index_translation.translate_index(index)` gives
the index keys with `object()` and its options with `rules()`. The
placeholders are `ValueType` values from `mongr8.values`, where
`to_value_type` converts any value or nested dict/list.

## Working with a project

- `mongr8.project` finds the project root (the nearest directory with a
  `go.mod` file), reads its module name and lists its `.go` files.
- `mongr8.loader` reads collection names and struct names from the files
  in `mongr8/collection/` and prepares template values for a new
  collection (`collection_template_vars`) and for the combined
  collection list (`combined_collections_template_vars`).
- `mongr8.migration_files` lists the migration variables in
  `mongr8/migration/YYYYMMDD_HHMMSS.go` files and gives the next number
  to use (`next_suffix`).
- `mongr8.textcase` converts names to snake case and capitalized camel
  case.
- `mongr8.options.migration_option_from_args` parses migration switches
  such as `-use-transaction` and `-desc` into a `MigrationOption`.

## Command line

Run these from inside a project that already has a `mongr8/cmd/`
folder with the migration programs:

```
mongr8 generate-migration --desc "add users"
mongr8 apply-migration
mongr8 consolidate-migration
```

`generate-migration` runs `go run main.go` in `mongr8/cmd/generate`,
passing `-use-sorted-schema`, `-use-force-conversion`,
`-use-schema-validation` (each on by default; give `--flag false` to
turn one off) and `-desc`. `apply-migration` runs `go run main.go` in
`mongr8/cmd/apply`. The program's output is printed; on failure the
error and output are logged and the exit status is 1.
`consolidate-migration` only prints `consolidateMigration called`.
Run `mongr8 --help` for the full list.

## What it does not do

mongr8 does not connect to MongoDB itself, and it does not write
collection or migration files. It does not set up the `mongr8/` folder
of a project or create the migration programs that `generate-migration`
and `apply-migration` run; those must already exist. Consolidating
migrations with a live database is not implemented.