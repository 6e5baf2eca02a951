from shtree.tools      import Tools
from shtree.reporter   import Reporter
from shtree.parser     import ArithParser
from shtree.codec      import fromjson
from shtree.synchecker import check
from shtree.walk       import depth

def main(argv = None):
    """
    usage:
    python3 shpp.py <tree>.json [-o out.sh]
    python3 shpp.py --arith '<expression>'

    prints the canonical shell text of a syntax tree
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)

    # parse args
    reporter.checkpoint("parsing")
    args = tools.parseargs(argv)
    if args.verbose:
        reporter.verbose = True
        reporter.info("start")

    # input to tree
    reporter.checkpoint("loading")
    if args.arith:
        tree = ArithParser(reporter).parse(args.input)
    else:
        data = tools.readjson(args.input)
        tree = None if data is None else fromjson(data, reporter)

    # structural checks
    reporter.checkpoint("checking")
    if tree is not None:
        if args.check:
            check(tree, reporter)
        if depth(tree) > args.max_depth:
            reporter.log(f"tree nested deeper than {args.max_depth}")

    # tree to text
    reporter.checkpoint("printing")
    text = '' if tree is None else tree.pprint()
    if not text.endswith('\n'):
        text += '\n'

    reporter.checkpoint("writing")
    tools.write(text, args.output, force = args.yes)

    reporter.checkpoint("end")


if __name__ == "__main__":
    main()
