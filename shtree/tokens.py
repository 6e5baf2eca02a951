# --------------------------------------------------------------------
import enum

# ====================================================================
# Lexical tokens
#
# one member per spelling, the value is the canonical text
# a spelling used in several contexts (`<<` heredoc and shift,
# `#` length prefix and prefix removal...) is a single member

class Token(enum.Enum):
    # keywords
    IF          = 'if'
    THEN        = 'then'
    ELIF        = 'elif'
    ELSE        = 'else'
    FI          = 'fi'
    WHILE       = 'while'
    UNTIL       = 'until'
    FOR         = 'for'
    IN          = 'in'
    DO          = 'do'
    DONE        = 'done'
    CASE        = 'case'
    ESAC        = 'esac'
    FUNCTION    = 'function'
    DECLARE     = 'declare'
    LOCAL       = 'local'
    NOT         = '!'
    LBRACE      = '{'
    RBRACE      = '}'

    # control operators
    SEMICOLON   = ';'
    DSEMICOLON  = ';;'
    AND         = '&'
    LAND        = '&&'
    OR          = '|'
    LOR         = '||'
    PIPEALL     = '|&'

    # grouping and quoting
    LPAREN      = '('
    RPAREN      = ')'
    DOLLAR      = '$'
    DOLLSQ      = "$'"
    DOLLDQ      = '$"'
    SQUOTE      = "'"
    DQUOTE      = '"'
    BQUOTE      = '`'

    # redirections
    LSS         = '<'
    GTR         = '>'
    SHR         = '>>'
    SHL         = '<<'
    DHEREDOC    = '<<-'
    DPLIN       = '<&'
    DPLOUT      = '>&'
    RDRINOUT    = '<>'
    CLBOUT      = '>|'
    WHEREDOC    = '<<<'
    RDRALL      = '&>'
    APPALL      = '&>>'
    CMDIN       = '<('
    CMDOUT      = '>('

    # parameter expansion
    HASH        = '#'
    DHASH       = '##'
    REM         = '%'
    DREM        = '%%'
    ADD         = '+'
    CADD        = ':+'
    SUB         = '-'
    CSUB        = ':-'
    QUEST       = '?'
    CQUEST      = ':?'
    ASSIGN      = '='
    CASSIGN     = ':='
    XOR         = '^'
    DXOR        = '^^'
    COMMA       = ','
    DCOMMA      = ',,'
    COLON       = ':'

    # arithmetic
    MUL         = '*'
    POW         = '**'
    QUO         = '/'
    TILDE       = '~'
    EQL         = '=='
    NEQ         = '!='
    LEQ         = '<='
    GEQ         = '>='
    INC         = '++'
    DEC         = '--'
    ADDASSGN    = '+='
    SUBASSGN    = '-='
    MULASSGN    = '*='
    QUOASSGN    = '/='
    REMASSGN    = '%='
    SHLASSGN    = '<<='
    SHRASSGN    = '>>='
    ANDASSGN    = '&='
    ORASSGN     = '|='
    XORASSGN    = '^='

    def pprint(self):
        return self.value

    def __str__(self):
        return self.value

# --------------------------------------------------------------------
# token families

HEREDOCS = frozenset({Token.SHL, Token.DHEREDOC})

REDIRECTS = frozenset({
    Token.LSS     , Token.GTR     , Token.SHR     , Token.SHL     ,
    Token.DHEREDOC, Token.DPLIN   , Token.DPLOUT  , Token.RDRINOUT,
    Token.CLBOUT  , Token.WHEREDOC, Token.RDRALL  , Token.APPALL  ,
})

QUOTES = frozenset({Token.DQUOTE, Token.DOLLSQ, Token.DOLLDQ})

EXPANSIONS = frozenset({
    Token.HASH , Token.DHASH  , Token.REM  , Token.DREM   ,
    Token.ADD  , Token.CADD   , Token.SUB  , Token.CSUB   ,
    Token.QUEST, Token.CQUEST , Token.ASSIGN, Token.CASSIGN,
    Token.XOR  , Token.DXOR   , Token.COMMA, Token.DCOMMA ,
    Token.COLON,
})

ASSIGNMENTS = frozenset({
    Token.ASSIGN  , Token.ADDASSGN, Token.SUBASSGN, Token.MULASSGN,
    Token.QUOASSGN, Token.REMASSGN, Token.SHLASSGN, Token.SHRASSGN,
    Token.ANDASSGN, Token.ORASSGN , Token.XORASSGN,
})

POSTFIX = frozenset({Token.INC, Token.DEC})
