# corekit

A small library of plain helpers for text handling, ordered collections, time
stamps and files. It has no dependencies outside the standard library.

## Modules

- `corekit.numbers`: lenient checks and parsing of numbers written as text:
  `is_numeric`, `zero_if_not_numeric`, `string_to_integer`,
  `string_to_integer_remove_start`, `string_to_integer_remove_start_and_end`,
  `padded`, `clean_spaces`, `clean_all_spaces`, `remove_line_breaks`.
- `corekit.findreplace`: find or replace many keys in one pass over a text,
  using a `KeywordTrie`. The functions are `find_any`, `replace_all`,
  `replace_pairs` and `to_lower_case`. Matching ignores ASCII case by default.
- `corekit.extraction`: text between markers, with nested markers balanced
  when the opening and closing markers differ. The functions are `extract`,
  `extract_and_replace`, `erase_stuff_between`, `get_everything_before` and
  `contains`. Each of them returns an `Extraction` with the fields `text`,
  `found` and `pos`.
- `corekit.strings`: replacing one string with several in turn
  (`replace_cycling`, `replace`), replacing a list of strings in order
  (`replace_sequence`, `replace_sequence_secure`), encoding lists, sets and maps
  as delimited text (`list_to_string`, `string_to_list`,
  `string_to_list_and_remove`, `count_in_string`, `set_to_string`,
  `string_to_set`, `string_to_map`), and also `sort_with_follower`,
  `reverse_string` and `increment_string`, a base-36 counter over `0-9a-z`.
- `corekit.indexed`: `IndexedSet` and `IndexedMap` are sorted containers that
  also give access by position (`s[i]`). They support `index` for rank lookup
  and `upper_bound`. Both are backed by an AVL tree that keeps subtree sizes.
- `corekit.timing`: a `Timer` stopwatch that reports milliseconds. It also has
  GMT strings in cookie format (`time_string`, `parse_gmt`,
  `sanitize_time_string`, `cookie_expiration`), `YYYYMMDD` style stamps, and
  calendar arithmetic on time vectors (`add_time`, `standardize_time`,
  `days_since`, `seconds_since`, `days_to_ymd`).
- `corekit.fileio`: reading files through a cache (`FileCache`,
  `file_to_string`), writing (`write_text`, `write_lines`,
  `write_sorted_lines`, `write_bytes`), and helpers for path names (`folder_of`,
  `stem`, `extension`, `is_legal_file_name`). It covers folder upkeep
  (`make_dir`, `create_folder_if_missing`, `clear_folder`, `delete_old_files`,
  `delete_folder_tree`, `copy_missing_files`). It can also run shell commands
  (`run_command`, `run_quiet`, `run_and_capture`).

## Examples

```python
from corekit.findreplace import replace_all
from corekit.extraction import extract
from corekit.strings import list_to_string, string_to_list
from corekit.indexed import IndexedSet
from corekit.timing import time_string

replace_all("The cat sat", {"cat": "dog", "sat": "ran"})
# 'The dog ran'

result = extract("a(b(c)d)e", 0, "(", ")")
result.text, result.found
# ('b(c)d', True)

encoded = list_to_string(["x", "y"])
string_to_list(encoded)
# ['x', 'y']

s = IndexedSet([5, 1, 3])
s[0], s.index(3), s.upper_bound(4)
# (1, 1, 2)

time_string([2020, 7, 19, 13, 59, 14, 3])
# 'Wed, 19 Aug 2020 13:59:14 GMT'
```

Errors are raised as exceptions:

- `parse_gmt` and `add_time` raise `ValueError` when their input is malformed.
- `file_to_string` raises `FileNotFoundError` when the file is missing.
- `rename_file` raises `FileExistsError` when the target is already there.

## What it does not do

This package is a library only. It has no command-line program, no server and
no storage of its own. The file helpers act directly on the local file system.
The `run_*` functions hand their command to the system shell.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]` and then run `pytest`.