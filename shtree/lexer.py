import ply.lex
import re

from .ast       import Pos
from .reporter  import Error

# arithmetic lexer: the inside of $((...)), ((...)) and for ((...))
# token names are the names of the matching shtree.tokens.Token members

class ArithLexer:
    tokens = (
        'NAME'      ,           # : str
        'NUMBER'    ,           # : str, digits kept as written
        'PARAM'     ,           # : str, $name without the $

        # Punctuation
        'LPAREN'    ,
        'RPAREN'    ,
        'SEMICOLON' ,
        'COMMA'     ,

        'ADD'       ,
        'SUB'       ,
        'MUL'       ,
        'QUO'       ,
        'REM'       ,
        'POW'       ,
        'SHL'       ,
        'SHR'       ,
        'AND'       ,
        'OR'        ,
        'XOR'       ,
        'TILDE'     ,
        'NOT'       ,
        'LAND'      ,
        'LOR'       ,
        'INC'       ,
        'DEC'       ,

        'EQL'       ,
        'NEQ'       ,
        'LSS'       ,
        'LEQ'       ,
        'GTR'       ,
        'GEQ'       ,

        'ASSIGN'    ,
        'ADDASSGN'  ,
        'SUBASSGN'  ,
        'MULASSGN'  ,
        'QUOASSGN'  ,
        'REMASSGN'  ,
        'SHLASSGN'  ,
        'SHRASSGN'  ,
        'ANDASSGN'  ,
        'ORASSGN'   ,
        'XORASSGN'  ,
    )

    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')
    t_SEMICOLON = re.escape(';')
    t_COMMA     = re.escape(',')

    t_ADD       = re.escape('+')
    t_SUB       = re.escape('-')
    t_MUL       = re.escape('*')
    t_QUO       = re.escape('/')
    t_REM       = re.escape('%')
    t_POW       = re.escape('**')
    t_SHL       = re.escape('<<')
    t_SHR       = re.escape('>>')
    t_AND       = re.escape('&')
    t_OR        = re.escape('|')
    t_XOR       = re.escape('^')
    t_TILDE     = re.escape('~')
    t_NOT       = re.escape('!')
    t_LAND      = re.escape('&&')
    t_LOR       = re.escape('||')
    t_INC       = re.escape('++')
    t_DEC       = re.escape('--')

    t_EQL       = re.escape('==')
    t_NEQ       = re.escape('!=')
    t_LSS       = re.escape('<')
    t_LEQ       = re.escape('<=')
    t_GTR       = re.escape('>')
    t_GEQ       = re.escape('>=')

    t_ASSIGN    = re.escape('=')
    t_ADDASSGN  = re.escape('+=')
    t_SUBASSGN  = re.escape('-=')
    t_MULASSGN  = re.escape('*=')
    t_QUOASSGN  = re.escape('/=')
    t_REMASSGN  = re.escape('%=')
    t_SHLASSGN  = re.escape('<<=')
    t_SHRASSGN  = re.escape('>>=')
    t_ANDASSGN  = re.escape('&=')
    t_ORASSGN   = re.escape('|=')
    t_XORASSGN  = re.escape('^=')

    t_ignore = ' \t'            # Ignore all whitespaces

    def __init__(self, reporter):
        self.lexer    = ply.lex.lex(module = self)
        self.reporter = reporter
        self.text     = ''
        self.errors   = 0

    def input(self, text):
        self.text   = text
        self.errors = 0
        self.lexer.lineno = 1
        self.lexer.input(text)

    def position(self, lineno, lexpos):
        """
        Pos of a token from ply's line number and offset
        """
        column = lexpos - self.text.rfind('\n', 0, lexpos)
        return Pos(lineno, column, lexpos)

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)

    def t_PARAM(self, t):
        r'\$([a-zA-Z_][a-zA-Z0-9_]*|[0-9])'
        t.value = t.value[1:]
        return t

    def t_NAME(self, t):
        r'[a-zA-Z_][a-zA-Z0-9_]*'
        return t

    def t_NUMBER(self, t):
        r'0[xX][0-9a-fA-F]+|[0-9]+'
        return t

    def t_error(self, t):
        self.errors += 1
        self.reporter.log(Error(
            f"lexer: illegal character '{t.value[0]}' -- skipping",
            position = self.position(t.lexer.lineno, t.lexer.lexpos),
        ))
        t.lexer.skip(1)
