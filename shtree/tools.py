import argparse
import json
import os
import sys

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return the parsed command line
        """
        parser = argparse.ArgumentParser(
            prog        = os.path.basename(sys.argv[0]),
            description = "print shell syntax trees as canonical shell text",
        )

        parser.add_argument('input',
            help = "syntax tree file (.json), - for stdin, or an expression with --arith")
        parser.add_argument('-o', '--output',
            help = "write the result here instead of stdout")
        parser.add_argument('-y', '--yes', action = 'store_true',
            help = "overwrite the output file without asking")
        parser.add_argument('--arith', action = 'store_true',
            help = "input is an arithmetic expression to normalize")
        parser.add_argument('--no-check', dest = 'check', action = 'store_false',
            help = "skip the structural checks")
        parser.add_argument('--max-depth', type = int, default = 200,
            help = "refuse trees nested deeper than this (default: %(default)s)")
        parser.add_argument('-v', '--verbose', action = 'store_true',
            help = "report progress on stderr")

        args = parser.parse_args(argv)

        if not args.arith and args.input != '-' and not args.input.endswith(".json"):
            parser.error("input filename must end with the .json extension")

        if args.max_depth < 1:
            parser.error("--max-depth must be positive")

        return args

    def readjson(self, filename):
        """
        read the json tree, None if it cannot be read
        """
        try:
            if filename == '-':
                return json.load(sys.stdin)
            with open(filename, "r", encoding = "utf-8") as f:
                return json.load(f)

        except (OSError, ValueError) as e:
            self.reporter.log(f"cannot read JSON file {filename}: {e}")

    def write(self, text, filename = None, force = False):
        """
        write the text to the file, or stdout without one
        """
        if filename is None:
            sys.stdout.write(text)
            return

        if os.path.exists(filename) and not force:
            if not self.reporter.confirm(f"file {{{filename}}} already exists, "
                                         "do you want to overwrite? [Y/n]"):
                return

        try:
            with open(filename, "w") as f:
                f.write(text)

        except OSError as e:
            self.reporter.log(f"Error writing file: {e}")
