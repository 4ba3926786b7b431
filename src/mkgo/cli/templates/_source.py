"""Go main package skeleton."""

from mkgo.cli._renderer import Template

SOURCE_EXTENSION = "go"

SOURCE = Template.from_text(
    '''\
package main

import (
	"flag"
	"fmt"

	"github.com/ardnew/version"
)

func init() {
	version.ChangeLog = []version.Change{{
		Package: "__NAME__",
		Version: "__VERSION__",
		Date:    "__DATE__",
		Description: []string{
			"initial implementation",
		},
	}}
}

func main() {

	var (
		argVersion bool
		argChanges bool
	)

	flag.BoolVar(&argVersion, "v", false, "Display version information")
	flag.BoolVar(&argChanges, "V", false, "Display change history")
	flag.Parse()

	if argChanges {
		version.PrintChangeLog()
	} else if argVersion {
		fmt.Printf("__NAME__ version %s\\n", version.String())
	} else {
		// main
	}
}
'''
)
