import ply.yacc

from .ast        import Pos
from .tokens     import Token
from .word       import Word, Lit, ParamExp
from .expression import UnaryExpr, BinaryExpr, ParenExpr, CStyleLoop
from .lexer      import ArithLexer
from .reporter   import Reporter, Error

class ArithParser:
    """
    builds arithmetic expression trees, positions taken from the tokens

    parse("a+b*2")          -> BinaryExpr(+, a, BinaryExpr(*, b, 2))
    parse_loop("i=0;i<3;i++") -> CStyleLoop
    both return None, with errors on the reporter, for bad input
    """
    tokens      = ArithLexer.tokens
    start       = 'arithm'
    precedence  = (
        ('left'     , 'COMMA'                       ),
        ('right'    , 'ASSIGN', 'ADDASSGN', 'SUBASSGN', 'MULASSGN',
                      'QUOASSGN', 'REMASSGN', 'SHLASSGN', 'SHRASSGN',
                      'ANDASSGN', 'ORASSGN', 'XORASSGN'  ),
        ('left'     , 'LOR'                         ),
        ('left'     , 'LAND'                        ),
        ('left'     , 'OR'                          ),
        ('left'     , 'XOR'                         ),
        ('left'     , 'AND'                         ),
        ('left'     , 'EQL', 'NEQ'                  ),
        ('left'     , 'LSS', 'GTR', 'LEQ', 'GEQ'    ),
        ('left'     , 'SHL', 'SHR'                  ),
        ('left'     , 'ADD', 'SUB'                  ),
        ('left'     , 'MUL', 'QUO', 'REM'           ),
        ('right'    , 'POW'                         ),
        ('right'    , 'UNARY', 'NOT', 'TILDE'       ),
        ('left'     , 'INC', 'DEC'                  ),
    )

    def __init__(self, reporter: Reporter):
        self.reporter       = reporter
        self.lexer          = ArithLexer(self.reporter)
        self.parser         = self.build('arithm')
        self.loop_parser    = self.build('loop')

    def build(self, start):
        return ply.yacc.yacc(
            module          = self,
            start           = start,
            debug           = False,
            write_tables    = False,
            errorlog        = ply.yacc.NullLogger(),
        )

    def run(self, parser, text):
        self.failed = False
        self.lexer.input(text)
        result = parser.parse(
            text,
            lexer       = self.lexer.lexer,
            tracking    = True,
        )
        return None if self.failed or self.lexer.errors else result

    def parse(self, text: str):
        return self.run(self.parser, text)

    def parse_loop(self, text: str):
        return self.run(self.loop_parser, text)

    def pos(self, p, n):
        return self.lexer.position(p.lineno(n), p.lexpos(n))

    def error(self, errstr, position, this = None):
        self.failed = True
        self.reporter.log(Error(errstr, this = this, position = position))

    # ----------------------------------------------------------------
    def p_arithm(self, p):
        """arithm : expr
                  | empty"""
        p[0] = p[1]

    def p_loop(self, p):
        """loop : arithm SEMICOLON arithm SEMICOLON arithm"""
        p[0] = CStyleLoop(
            init        = p[1],
            cond        = p[3],
            post        = p[5],
        )

    def p_empty(self, p):
        """empty :"""
        p[0] = None

    def p_name(self, p):
        """expr : NAME
                | NUMBER"""
        p[0] = Word((
            Lit(p[1], value_pos = self.pos(p, 1)),
        ))

    def p_param(self, p):
        """expr : PARAM"""
        dollar = self.pos(p, 1)
        param  = Pos(dollar.line, dollar.column + 1, dollar.offset + 1)
        p[0] = Word((
            ParamExp(
                param       = Lit(p[1], value_pos = param),
                short       = True,
                dollar      = dollar,
            ),
        ))

    def p_unary_operation(self, p):
        """expr : SUB   expr %prec UNARY
                | ADD   expr %prec UNARY
                | NOT   expr
                | TILDE expr
                | INC   expr
                | DEC   expr"""
        p[0] = UnaryExpr(
            op          = Token(p[1]),
            x           = p[2],
            op_pos      = self.pos(p, 1),
        )

    def p_postfix_operation(self, p):
        """expr : expr INC
                | expr DEC"""
        p[0] = UnaryExpr(
            op          = Token(p[2]),
            x           = p[1],
            post        = True,
            op_pos      = self.pos(p, 2),
        )

    def p_binary_operation(self, p):
        """expr : expr COMMA    expr
                | expr LOR      expr
                | expr LAND     expr
                | expr OR       expr
                | expr XOR      expr
                | expr AND      expr
                | expr EQL      expr
                | expr NEQ      expr
                | expr LSS      expr
                | expr LEQ      expr
                | expr GTR      expr
                | expr GEQ      expr
                | expr SHL      expr
                | expr SHR      expr
                | expr ADD      expr
                | expr SUB      expr
                | expr MUL      expr
                | expr QUO      expr
                | expr REM      expr
                | expr POW      expr"""
        p[0] = BinaryExpr(
            op          = Token(p[2]),
            x           = p[1],
            y           = p[3],
            op_pos      = self.pos(p, 2),
        )

    def p_assignment(self, p):
        """expr : expr ASSIGN   expr
                | expr ADDASSGN expr
                | expr SUBASSGN expr
                | expr MULASSGN expr
                | expr QUOASSGN expr
                | expr REMASSGN expr
                | expr SHLASSGN expr
                | expr SHRASSGN expr
                | expr ANDASSGN expr
                | expr ORASSGN  expr
                | expr XORASSGN expr"""
        match p[1]:
            case Word((Lit(value),)) if not value[0].isdigit():
                pass
            case _:
                self.error(f"cannot assign with `{p[2]}' to a non-variable",
                           self.pos(p, 2), this = p[1].pprint())

        p[0] = BinaryExpr(
            op          = Token(p[2]),
            x           = p[1],
            y           = p[3],
            op_pos      = self.pos(p, 2),
        )

    def p_parentheses(self, p):
        """expr : LPAREN expr RPAREN"""
        p[0] = ParenExpr(
            x           = p[2],
            lparen      = self.pos(p, 1),
            rparen      = self.pos(p, 3),
        )

    def p_error(self, p):
        if p:
            self.error(f"syntax error at `{p.value}'",
                       self.lexer.position(p.lineno, p.lexpos))
        else:
            self.error("syntax error at end of expression", None)
