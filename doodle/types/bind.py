from __future__ import annotations

import logging
from typing import Any, Optional

from doodle import config
from doodle.errors import BindingArityError, BindingKeyError
from doodle.lists import as_sequence
from doodle.printer import prn_str
from doodle.types.frame import Frame
from doodle.types.symbol import Symbol

_log = logging.getLogger(__name__)


def to_dictionary(exprs: Any, strict: Optional[bool] = None) -> Frame:
    """
    Interpret a flat `let`-style binding list as name -> value bindings.

    `exprs` alternates names and values: (a 1 b 2) binds a to 1 and b to 2.
    Pairs are taken left to right, so a repeated name keeps its last value.

    A pair whose name is not a Symbol is skipped. This lenient parse is the
    intended behaviour; pass strict=True (or set DOODLE_STRICT_BINDINGS) to
    raise BindingKeyError instead.

    Raises BindingArityError when the list has an odd number of forms.
    """

    exprs = as_sequence(exprs)
    if len(exprs) % 2 != 0:
        raise BindingArityError("Bindings in let should be expressed in pairs.")
    if strict is None:
        strict = config.strict_bindings()

    bindings = Frame()
    for i in range(0, len(exprs), 2):
        name, value = exprs[i], exprs[i + 1]
        if not isinstance(name, Symbol):
            if strict:
                raise BindingKeyError(f"Binding name must be a symbol, got {prn_str(name)}")
            _log.debug("Skipping binding with non-symbol name %s", name)
            continue
        bindings = bindings.assoc(name.name, value)
    return bindings
