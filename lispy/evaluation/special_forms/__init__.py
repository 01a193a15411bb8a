"""Registry of special forms for the Lispy evaluator.

`SpecialForm` is the closed set of reserved head keywords. `SPECIAL_FORMS`
maps each keyword's Symbol to the handler implementing its evaluation rule.
The evaluator consults this table before falling back to ordinary function
application.
"""

from enum import Enum

from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.lambda_form import lambda_form
from lispy.evaluation.special_forms.defn_form import defn_form
from lispy.evaluation.special_forms.doall_form import doall_form
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.quote_form import quote_form
from lispy.evaluation.special_forms.eval_form import eval_form


class SpecialForm(Enum):
    LAMBDA = "lambda"
    DEFN = "defn"
    DOALL = "doall"
    IF = "if"
    DEFINE = "define"
    QUOTE = "quote"
    EVAL = "eval"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)


_HANDLERS = {
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.DEFN: defn_form,
    SpecialForm.DOALL: doall_form,
    SpecialForm.IF: if_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.EVAL: eval_form,
}

SPECIAL_FORMS = {form.symbol: _HANDLERS[form] for form in SpecialForm}
