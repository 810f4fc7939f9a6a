"""
Abstract-Syntax-Tree (AST) node types

Every grammar production builds exactly one node class. A node owns its
children outright and is never modified after it is built.

Names of variables and procedures are plain strings.

Prog
    main:   Main
    others: list of Other

Main
    declarations: list of IntDecl | StackDecl
    body:         statement

Other
    name:   procedure name
    params: list of Param
    body:   statement

A list of statements is a right nested chain of Sequence nodes:
    s1 s2 s3  =>  Sequence(s1, Sequence(s2, s3))

A chain of binary operators is right nested, there is no precedence:
    a + b * c  =>  BinOp(a, +, BinOp(b, *, c))
"""

class Type(object):
    INT = "Int"
    STACK = "Stack"

class ModOp(object):
    ADD = "Add"
    SUB = "Sub"
    XOR = "Xor"

class Op(object):
    ADD = "Add"
    SUB = "Sub"
    XOR = "Xor"
    MUL = "Mul"
    DIV = "Div"
    MOD = "Mod"
    AND = "And"
    OR = "Or"
    AND2 = "And2"
    OR2 = "Or2"
    LESS = "Less"
    GREATER = "Greater"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    LESS_EQUAL = "LessEqual"
    GREATER_EQUAL = "GreaterEqual"

class Node(object):
    """ base class for all tree nodes

    subclasses list their attributes in `_fields`, in constructor order
    """
    _fields = ()

    def __init__(self, *args, **kwargs):
        super(Node, self).__init__()

        if len(args) > len(self._fields):
            raise TypeError("%s takes %d arguments" % (
                type(self).__name__, len(self._fields)))

        values = dict(zip(self._fields, args))
        for name, value in kwargs.items():
            if name not in self._fields or name in values:
                raise TypeError("%s: unexpected argument %r" % (
                    type(self).__name__, name))
            values[name] = value

        for name in self._fields:
            if name not in values:
                raise TypeError("%s: missing argument %r" % (
                    type(self).__name__, name))
            setattr(self, name, values[name])

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        # compare with a work list, chains may be thousands of nodes long
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if isinstance(a, Node) or isinstance(b, Node):
                if type(a) is not type(b):
                    return False
                for name in a._fields:
                    pending.append((getattr(a, name), getattr(b, name)))
            elif isinstance(a, list) and isinstance(b, list):
                if len(a) != len(b):
                    return False
                pending.extend(zip(a, b))
            elif a != b:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        parts = []
        # (True, text) is output, (False, value) is still to be rendered
        stack = [(False, self)]
        while stack:
            literal, item = stack.pop()
            if literal:
                parts.append(item)
            elif isinstance(item, Node):
                work = [(True, "%s(" % type(item).__name__)]
                for i, name in enumerate(item._fields):
                    if i:
                        work.append((True, ", "))
                    work.append((False, getattr(item, name)))
                work.append((True, ")"))
                stack.extend(reversed(work))
            elif isinstance(item, list):
                work = [(True, "[")]
                for i, value in enumerate(item):
                    if i:
                        work.append((True, ", "))
                    work.append((False, value))
                work.append((True, "]"))
                stack.extend(reversed(work))
            else:
                parts.append(repr(item))
        return "".join(parts)

    def __str__(self):
        return self.toString(False)

    def children(self):
        """ yield the child nodes, in field order """
        for name in self._fields:
            value = getattr(self, name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        yield item

    def flatten(self, depth=0):
        items = []
        stack = [(depth, self)]
        while stack:
            depth, node = stack.pop()
            items.append((depth, node))
            stack.extend((depth + 1, child)
                for child in reversed(list(node.children())))
        return items

    def _chain(self):
        """ the items of a right nested chain starting at this node

        None for nodes which do not form chains
        """
        return None

    def toString(self, pretty=True, depth=0, pad="  "):
        """ render the tree

        a right nested chain (statements joined by Sequence, operands
        joined by BinOp) is rendered as one flat list under the first
        node of the chain
        """

        if not pretty:
            return repr(self)

        parts = []
        # a str is an output line, a tuple is a (depth, node) to expand
        stack = [(depth, self)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            depth, node = item
            prefix = pad * (depth + 1)
            work = []

            chain = node._chain()
            if chain is not None:
                parts.append("%s%s [%d]\n" % (
                    pad * depth, type(node).__name__, len(chain)))
                for value in chain:
                    if isinstance(value, Node):
                        work.append((depth + 1, value))
                    else:
                        work.append("%s%r\n" % (prefix, value))
                stack.extend(reversed(work))
                continue

            parts.append("%s%s\n" % (pad * depth, type(node).__name__))
            for name in node._fields:
                value = getattr(node, name)
                if isinstance(value, Node):
                    work.append("%s%s:\n" % (prefix, name))
                    work.append((depth + 2, value))
                elif isinstance(value, list):
                    work.append("%s%s: [%d]\n" % (prefix, name, len(value)))
                    for elem in value:
                        if isinstance(elem, Node):
                            work.append((depth + 2, elem))
                        else:
                            work.append("%s%r\n" % (pad * (depth + 2), elem))
                else:
                    work.append("%s%s: %r\n" % (prefix, name, value))
            stack.extend(reversed(work))

        return ''.join(parts)

# program structure

class Prog(Node):
    _fields = ("main", "others")

class Main(Node):
    _fields = ("declarations", "body")

class Other(Node):
    _fields = ("name", "params", "body")

class Param(Node):
    _fields = ("type", "var")

class IntDecl(Node):
    _fields = ("decl",)

class StackDecl(Node):
    _fields = ("var",)

class Scalar(Node):
    _fields = ("var",)

class Array(Node):
    """ a fixed size array declaration, size is a Constant """
    _fields = ("var", "size")

# statements

class AssignScalar(Node):
    _fields = ("var", "op", "expr")

class AssignArray(Node):
    _fields = ("var", "index", "op", "expr")

class Conditional(Node):
    """ if test then ... else ... fi assertion

    the assertion must hold after the branch taken by test
    """
    _fields = ("test", "then_branch", "else_branch", "assertion")

class Loop(Node):
    """ from entry do ... loop ... until exit

    entry holds only on the first iteration, exit ends the loop
    """
    _fields = ("entry", "do_body", "loop_body", "exit")

class Push(Node):
    _fields = ("var", "stack")

class Pop(Node):
    _fields = ("var", "stack")

class Local(Node):
    _fields = ("local_type", "local_var", "local_value", "body",
               "delocal_type", "delocal_var", "delocal_value")

class Call(Node):
    _fields = ("name", "args")

class Uncall(Node):
    _fields = ("name", "args")

class Skip(Node):
    pass

class Sequence(Node):
    _fields = ("first", "rest")

    def statements(self):
        """ the statements of the chain, in source order """
        items = []
        stmt = self
        while isinstance(stmt, Sequence):
            items.append(stmt.first)
            stmt = stmt.rest
        items.append(stmt)
        return items

    def _chain(self):
        return self.statements()

# expressions

class Constant(Node):
    _fields = ("value",)

class Variable(Node):
    _fields = ("name",)

class Index(Node):
    _fields = ("var", "index")

class BinOp(Node):
    _fields = ("left", "op", "right")

    def _chain(self):
        # operand, operator, operand, ... operand
        items = []
        expr = self
        while isinstance(expr, BinOp):
            items.append(expr.left)
            items.append(expr.op)
            expr = expr.right
        items.append(expr)
        return items

class Empty(Node):
    _fields = ("var",)

class Top(Node):
    _fields = ("var",)

class Nil(Node):
    pass
