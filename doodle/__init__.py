# Expression value model for the Doodle interpreter.
#
# Every evaluable form is an immutable `Expr` (see doodle.types). Map and
# environment keys are the parallel `ExprKey` family. Equality and hashing
# live in doodle.equality, the canonical printer in doodle.printer and the
# car/cdr/last accessors in doodle.lists.
#
# Naming guidance:
# - SExpression: Use in reader/evaluator code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Expr` since code and data share one representation.

import logging

from doodle import config
from doodle.types.expr import Expr

# Runtime value alias
LispValue = Expr
SExpression = LispValue

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())
_log.setLevel(config.get_log_level())
