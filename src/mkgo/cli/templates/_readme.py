"""README.md skeleton."""

from mkgo.cli._renderer import Template

README = Template.from_text(
    """\
[docimg]:https://pkg.go.dev/badge/__IMPORT__.svg
[docurl]:https://pkg.go.dev/__IMPORT__
[repimg]:https://goreportcard.com/badge/__IMPORT__
[repurl]:https://goreportcard.com/report/__IMPORT__

# __NAME__
#### __NAME__

[![Go Reference][docimg]][docurl] [![Go Report Card][repimg]][repurl]

## Usage

How to use:

```sh
__NAME__ ...
```

Use the `-h` flag for usage summary:

```
Usage of __NAME__:
  -V    Display change history
  -v    Display version information
```

## Installation

Use the builtin Go package manager:

```sh
go install -v __IMPORT__@latest
```
"""
)
