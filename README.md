# v2lang

Tools for **V2**, a small configuration-as-code format. The package:

- reads `.v2` configuration files into a tree of `ConfigItem` objects
- writes that tree out as JSON or YAML
- runs simple structural checks on the JSON or YAML it writes
- runs `.v2f` scripts, a small line-based command format

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `.v2` format

```
# comments start with '#'
name=demo
version=1.2
server {
    host=localhost
    port=8080
}
tag=alpha
tag=beta
```

- `key=value` sets a value. Whitespace before the key and between the key
  and `=` is dropped, but the value is everything after `=`, spaces
  included: `name = demo` gives the value `" demo"`.
- `key {` opens a section; any line containing `}` closes it.
- Blank lines and lines that start with `#` are skipped; other lines that
  match none of the above are ignored.
- Keys and values are cut to 127 characters.
- A `}` with no open section raises `V2SyntaxError`.

## Command line: `v2`

```
v2 --transpiler::json config.v2          # writes config.json
v2 --transpiler::yaml config.v2          # writes config.yaml
v2 --transpiler::json --checkDesignJSON config.v2
v2 --transpiler::yaml --checkDesignYAML config.v2
v2 --load config.v2                      # prints the parsed tree
v2 --help
v2 --version
v2 --author
```

Options apply to the file names that come after them on the command line.
The output file name is the input name with everything from its last dot
replaced by `.json` or `.yaml` (or the extension appended if there is no
dot). `--load` is carried out after all other files have been handled; it
prints `Interpreting <file>:` and then the tree as `key = value` lines, with
sections shown as `key:` and their contents indented two spaces.

- `--checkDesignJSON` writes values that read as numbers (C-style
  floating-point literals, including hex, `inf` and `nan`), `true`, `false`
  and `null` as bare JSON values instead of strings, then checks that the
  braces and brackets outside strings in the output balance.
- `--checkDesignYAML` checks the YAML output for tab characters, indentation
  that grows by more than one level or is inconsistent within a level, and
  unclosed quoted strings. It also warns about indents that are not a
  multiple of two and unquoted values containing `{ } [ ] & *`. Messages go
  to standard error.

In JSON output, keys that appear more than once in the same section are
gathered into one array at the position of the first occurrence. Sections
are indented four spaces per level.

In YAML output, values containing whitespace, control characters, non-ASCII
characters or any of `: # { } [ ] & * ! | > ' " ,` are double-quoted, with
embedded `"` escaped.

Exit status is 1 when no arguments are given, when `--load` has no file
name, or when the `--load` file cannot be read or parsed; otherwise 0.

## Command line: `v2file`

```
v2file script.v2f
```

Each line of the script can be one of these commands:

| Line                           | Effect                                       |
|--------------------------------|----------------------------------------------|
| `createfile.system(out.txt)`   | creates the file, emptying it if it exists   |
| `print.system(hello)`          | prints `hello` to standard output            |
| `error.system(oops)`           | prints `oops` to standard error              |
| `os.system(ls -l)`             | runs the command in the system shell         |

The argument is the text up to the first `)`. Any other line is ignored.

## Library use

```python
from v2lang.model import ConfigItem, V2SyntaxError, parse_v2, load_v2
from v2lang.jsonout import to_json, check_json_design
from v2lang.yamlout import to_yaml, check_yaml_design
from v2lang.cli import interpret_config
from v2lang.script import interpret

tree = parse_v2(["name=demo\n", "server {\n", "port=80\n", "}\n"])
print(to_json(tree, check_design=True))
print(to_yaml(tree))
print(interpret_config(tree))

report = check_yaml_design(to_yaml(tree))
print(report.ok, report.errors, report.warnings)

interpret("print.system(hello)\n")
```

- `parse_v2(lines)` takes any iterable of lines; `load_v2(path)` reads a file.
- `ConfigItem` has `key`, `value` (`None` for sections) and `children`.
- `check_json_design(text)` returns a bool; `check_yaml_design(text)`
  returns a `YamlReport` with `errors`, `warnings` and `ok`.

## What it does not do

The JSON and YAML checks look only at balance, indentation, tabs and quoting;
they are not full JSON or YAML validators. There is no way to read JSON or
YAML back into a `.v2` tree, and no `.v2` output writer.