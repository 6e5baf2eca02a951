# --------------------------------------------------------------------
import dataclasses as dc
import typing

from .ast        import Node, Pos
from .tokens     import Token
from .reporter   import Reporter, Error, Errors
from .           import word, expression, statement

# ====================================================================
# JSON form of syntax trees
#
# a node is an object {"type": <class name>, <field>: <value>...}
# fields equal to their default are left out; tuples are lists and
# tokens are their spelling. fields named op/quote hold tokens

TOKEN_FIELDS = frozenset({'op', 'quote'})

# every name the node annotations refer to, forward references included
NAMESPACE = {
    name: value
    for module in (word, expression, statement)
    for name, value in vars(module).items()
}

def node_types():
    types = {'Pos': Pos}
    for name, value in NAMESPACE.items():
        if isinstance(value, type) and dc.is_dataclass(value):
            types[name] = value
    return types

NODE_TYPES = node_types()

FIELD_TYPES = {
    name: {field.name: field.type for field in dc.fields(cls)}
    for name, cls in NODE_TYPES.items()
}

# --------------------------------------------------------------------
def resolve(hint):
    match hint:
        case str():
            return NAMESPACE[hint]
        case typing.ForwardRef():
            return NAMESPACE[hint.__forward_arg__]
    return hint

def conforms(value, hint) -> bool:
    """
    does a decoded value fit the field annotation
    """
    hint   = resolve(hint)
    origin = typing.get_origin(hint)
    if origin is tuple:
        item = typing.get_args(hint)[0]
        return isinstance(value, tuple) and all(conforms(x, item) for x in value)
    if origin is typing.Union:
        return any(conforms(value, arg) for arg in typing.get_args(hint))
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)

def describe(hint) -> str:
    hint   = resolve(hint)
    origin = typing.get_origin(hint)
    if origin is tuple:
        return f'a list of {describe(typing.get_args(hint)[0])}'
    if origin is typing.Union:
        return ' or '.join(describe(arg) for arg in typing.get_args(hint))
    if hint is type(None):
        return 'null'
    return hint.__name__

# --------------------------------------------------------------------
def tojson(node):
    match node:
        case Token():
            return node.value
        case tuple() | list():
            return [tojson(x) for x in node]
        case _ if dc.is_dataclass(node) and type(node).__name__ in NODE_TYPES:
            data = {'type': type(node).__name__}
            for field in dc.fields(node):
                value = getattr(node, field.name)
                if field.default is not dc.MISSING and value == field.default:
                    continue
                data[field.name] = tojson(value)
            return data
        case None | bool() | int() | str():
            return node

    raise TypeError(f'cannot encode {node!r}')

# --------------------------------------------------------------------
class Decoder:
    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self.errors   = Errors()

    def report(self, msg, path):
        self.errors.add(Error(msg, context = path))

    def token(self, value, path):
        if isinstance(value, str):
            try:
                return Token(value)
            except ValueError:
                pass
        self.report(f"unknown token `{value}'", path)

    def field(self, name, key, value, path):
        hint   = FIELD_TYPES[name][key]
        before = len(self.errors)

        if key in TOKEN_FIELDS and value is not None:
            decoded = self.token(value, path)
        else:
            decoded = self.decode(value, path)

        # a nested failure is already reported
        if len(self.errors) == before and not conforms(decoded, hint):
            self.report(f"field `{key}' of {name} expects {describe(hint)}", path)
        return decoded

    def node(self, data, path):
        name = data.get('type')
        if not isinstance(name, str) or name not in NODE_TYPES:
            self.report(f"unknown node type `{name}'", path)
            return None

        cls    = NODE_TYPES[name]
        kwargs = {}
        for key, value in data.items():
            if key == 'type':
                continue
            if key not in FIELD_TYPES[name]:
                self.report(f"unknown field `{key}' for {name}", path)
                continue
            kwargs[key] = self.field(name, key, value, f'{path}.{key}')

        try:
            return cls(**kwargs)
        except TypeError as e:
            self.report(f"cannot build {name}: {e}", path)
            return None

    def decode(self, data, path = '$'):
        match data:
            case dict():
                return self.node(data, path)
            case list():
                return tuple(self.decode(x, f'{path}[{i}]') for i, x in enumerate(data))
            case _:
                return data

# --------------------------------------------------------------------
def fromjson(data, reporter: Reporter):
    """
    the tree encoded by data, None (with errors on the reporter) if data
    does not describe one
    """
    decoder = Decoder(reporter)
    node    = decoder.decode(data)
    if not decoder.errors and not isinstance(node, Node):
        decoder.report("expected a syntax tree node at the top", '$')
    if decoder.errors:
        reporter.log(decoder.errors)
        return None
    return node
