"""IRS forms and the attachment resolver."""

from taxgraph.forms.attachments import filed_forms, resolve_attachments, summarize
from taxgraph.forms.base import Form, Value, line, subordinate
from taxgraph.forms.f1040 import F1040
from taxgraph.forms.f8959 import F8959
from taxgraph.forms.schedule2 import Schedule2
from taxgraph.forms.schedule3 import Schedule3

__all__ = [
    "F1040",
    "F8959",
    "Form",
    "Schedule2",
    "Schedule3",
    "Value",
    "filed_forms",
    "line",
    "resolve_attachments",
    "subordinate",
    "summarize",
]
