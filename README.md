# greeter

A small library and command for saying hello in English, German, Spanish
and French.

## Installation

```
pip install .
```

## Library use

```python
from greeter.core import Greeter, LanguageCode

greeter = Greeter("World")
print(greeter.greet())                 # Hello, World!
print(greeter.greet(LanguageCode.DE))  # Hallo World!
print(greeter.greet(LanguageCode.ES))  # ¡Hola World!
print(greeter.greet(LanguageCode.FR))  # Bonjour World!
```

`LanguageCode` has the members `EN`, `DE`, `ES` and `FR`.
`Greeter.greet` uses English when no language is given, and also for any
value that is not one of those members.

## Command line

The `greeter` command (also `python -m greeter.cli`) prints one greeting:

```
greeter                   # Hello, World!
greeter --name Ada        # Hello, Ada!
greeter -n Ada -l fr      # Bonjour Ada!
greeter --help
```

Options:

- `-n`, `--name`: the name to greet (default `World`)
- `-l`, `--lang`: the language code, one of `en`, `de`, `es`, `fr` (default `en`)
- `-h`, `--help`: show help and exit with status 0

If the language code is unknown, the command prints
`unknown language code: <code>` to standard error and exits with status 1.

## Limitations

The command accepts `-v` / `--version`, but the flag has no effect: it
does not print a version number, and the greeting is printed as usual.
The package version is available as `greeter.__version__`.

## Running the tests

```
pip install ".[test]"
pytest
```