# Grammar for declarations written as formulas
#
# lhs ~ rhs     named declaration (R formula style)
# lhs = rhs     named declaration
# ~ rhs         anonymous declaration
# rhs           anonymous declaration
#
# Indexed variables use brackets with a compartment name or a position:
# C["central"], C['central'], C[central], A[2]

grammar = r"""
%ignore /[ \t\f\r\n]+/

start: named | anonymous
named: NAME ("~" | "=") _sum
anonymous: ["~"] _sum

_sum: sum
?sum: product
    | sum "+" product -> add
    | sum "-" product -> sub
?product: unary
    | product "*" unary -> mul
    | product "/" unary -> div
?unary: power
    | "-" unary -> neg
    | "+" unary
?power: atom
    | atom ("^" | "**") unary -> pow
?atom: NUMBER -> number
    | NAME -> symbol
    | NAME "[" index "]" -> indexed
    | NAME "(" [_arguments] ")" -> call
    | "(" sum ")"

_arguments: sum ("," sum)*

index: STRING -> name_index
    | NAME -> name_index
    | NUMBER -> position_index

STRING: /"[^"]*"/ | /'[^']*'/
NAME: /[A-Za-z_][A-Za-z0-9_]*/
NUMBER: /(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?/
"""
