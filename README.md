# sysconf

A small command for listing, querying and changing values in key/value
configuration files. It copes with entries separated by `=`, `:` or plain
whitespace, with optional quotes and a trailing `;`, and with dotted names
such as `key.subkey = value;`.

When asked for a single key it prints only that key's value, which makes it
handy in shell scripts.

## Installation

```
pip install .
```

## Usage

```
sysconf -f <config_file> [key[=value]]
```

Show every entry in a file as aligned `key = values` lines (values after a
token starting with `#` are left out):

```
sysconf -f /etc/rc.conf
```

Print the value of one key (exits with status 1 if the key is absent):

```
sysconf -f /etc/rc.conf sshd_enable
```

Set a key, replacing its value, or append it to the end of the file as
`key = "value"` if it is not there:

```
sysconf -f /etc/rc.conf sshd_enable=YES
```

If the key already holds that value, `Value found. No change made.` is
printed and the file is left alone.

Add a value to a key's existing list of values:

```
sysconf -f /etc/rc.conf "ifconfig_em0+=up"
```

Remove a value from a key's list; if it was the last value, the key's line is
removed:

```
sysconf -f /etc/rc.conf "ifconfig_em0-=up"
```

The command can also be started with `python -m sysconf.cli`.

### Notes on behaviour

- Lines starting with `#`, `;`, `/`, `*` or `[` (after leading whitespace)
  are treated as comments or section headers and are ignored when reading.
- A key is looked up by prefix: the first entry whose key is a prefix of the
  requested name is the one used.
- Changes are written to a temporary file named `.sys.conf.file.tmp` in the
  same directory, which then replaces the original file. Any later lines that
  start with the same key are dropped.
- Missing or wrong arguments print a usage line and a fatal error message to
  standard error and exit with status 255. An unreadable file prints
  `Failed to parse the configuration file.` and exits with status 1.

## Library use

The parsing and writing functions can be used directly:

```python
from sysconf.parser import DEFAULT_DELIMITERS, parse_config, get_value
from sysconf.writer import format_config, replace_variable, write_variable

entries = parse_config("app.conf", DEFAULT_DELIMITERS)
print(format_config(entries))
print(get_value(entries, "item1"))   # ('item1', 'value1', ...) or None
```

- `sysconf.parser`: `make_argv`, `count_tokens`, `parse_config`,
  `find_config_item`, `get_value`, `print_config_item` and the `ConfigEntry`
  dataclass.
- `sysconf.writer`: `format_config`, `print_config_file`, `assemble_strings`,
  `replace_variable` and `write_variable`.
- `sysconf.errors`: `AbortCode`, `TranslationAbort` and `abort_translation`.
- `sysconf.cli`: `main` and `contains`.

## Limitations

There is no per-file defaults checking: a configuration file is never compared
with a separate defaults file, and duplicate settings are not reported.

## Running the tests

```
pip install .[test]
pytest
```