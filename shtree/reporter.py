import sys

class Reporter():
    """
    report errors

    errors pile up in a backlog tagged with the current section,
    checkpoint() stops the program if anything went wrong so far
    """
    def __init__(self, verbose = False, stream = None):
        self.errors  = []
        self.section = None
        self.verbose = verbose
        self.stream  = stream or sys.stderr

    def tagged(self, msg):
        return f"{{{self.section}}} \t| {msg}"

    def crash(self, errstr):
        print("=== Error backlog ===", file=self.stream)
        for err in self.errors:
            print(f"[ Error ] {err}", file=self.stream)

        if self.section:
            errstr = self.tagged(errstr)
        print(f"[ Fatal Error ] | {errstr}", file=self.stream)

        sys.exit(1)

    def log(self, error):
        """
        queue one error, or every error of an Errors collection
        """
        if isinstance(error, Errors):
            self.errors += [self.tagged(err) for err in error]
        else:
            self.errors.append(self.tagged(error))

    def info(self, msg):
        if self.verbose:
            print(f"[ Info ] {self.tagged(msg)}", file=self.stream)

    def checkpoint(self, section = None):
        self.section = section

        if self.errors:
            self.crash("error backlog at checkpoint")

        self.info("start")

    def confirm(self, question):
        """
        yes unless answered with something else than y...; closed input is a no
        """
        try:
            answer = input(question)
        except EOFError:
            return False
        return not answer or answer[0].lower() == "y"

class Error():
    """
    one diagnostic: what went wrong, in which construct, where
    """
    def __init__(self, errstr, this = None, context = None, position = None):
        self.errstr     = errstr
        self.this       = this
        self.context    = context
        self.position   = position

    def __repr__(self):
        parts = [self.errstr]
        if self.this:
            parts.append(f"in {{{self.this}}}")
        if self.context:
            parts.append(f"in context {{{self.context}}}")
        if self.position is not None and self.position.is_valid():
            parts.append(f"at {self.position}")
        return ' '.join(parts)

class Errors():
    def __init__(self, errors = None):
        self.errors = errors or []

    def __iter__(self):
        return iter(self.errors)

    def __len__(self):
        return len(self.errors)

    def __repr__(self):
        return "; ".join(str(err) for err in self.errors)

    def add(self, error : Error):
        self.errors.append(error)
        return self
