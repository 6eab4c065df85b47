"""
This module defines what the tree-walker passes around.
Constants play themselves (they are already fully-reduced syntax) and
functions are their own definitions; statement execution answers with
a ControlFlow signal rather than throwing anything.
"""
import decimal
import math
from typing import NamedTuple, Union
from .. import syntax
from ..environment import Environment

VALUE = Union[syntax.Constant, syntax.Function]
ENV = Environment[VALUE]

class Continue(NamedTuple):
	""" The statement finished normally; carry on with this environment. """
	env: ENV

class Return(NamedTuple):
	""" Something executed `return`. Composition stops here and hands the value outward. """
	value: VALUE

CONTROL_FLOW = Union[Continue, Return]

###############################################################################

I32_MIN, I32_MAX = -2**31, 2**31 - 1

def to_i32(x:float) -> int:
	""" Truncate toward zero, saturating at the 32-bit limits. NaN becomes zero. """
	if math.isnan(x): return 0
	if x >= I32_MAX: return I32_MAX
	if x <= I32_MIN: return I32_MIN
	return int(x)

def ieee_divide(a:float, b:float) -> float:
	""" Division as the hardware does it, so dividing by zero is a value and not an exception. """
	if b: return a / b
	if a == 0 or math.isnan(a): return math.nan
	return math.copysign(math.inf, a) * math.copysign(1.0, b)

def render_real(r:float) -> str:
	""" The shortest digits that read back as the same float, written out positionally without an exponent. """
	if math.isnan(r): return "NaN"
	if math.isinf(r): return "inf" if r > 0 else "-inf"
	digits = decimal.Decimal(repr(r))
	if r.is_integer(): digits = digits.to_integral_value()
	return format(digits, "f")

def render(value:syntax.Constant) -> str:
	""" Text for the Print statement. Caller has already checked that this is a constant. """
	if isinstance(value, syntax.Boolean): return "true" if value.value else "false"
	if isinstance(value, syntax.Real): return render_real(value.value)
	return str(value.value)
