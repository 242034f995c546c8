"""Attachment resolution and the return's output contract.

Walks the subordinate table each form declares, keeps the forms whose trigger
predicate holds, and orders them by IRS attachment sequence number.
"""

import logging

from taxgraph.forms.base import Form
from taxgraph.forms.f1040 import F1040
from taxgraph.models.reports import FormLines, ReturnSummary

logger = logging.getLogger(__name__)


def resolve_attachments(root: Form) -> list[Form]:
    """Attached subordinate forms of ``root`` (recursively), in filing order."""
    attached: list[Form] = []
    for entry in type(root).subordinates:
        form = getattr(root, entry.name)
        if form is None:
            continue
        attached.append(form)
        attached.extend(resolve_attachments(form))
    attached.sort(key=lambda f: f.sequence)
    logger.debug(
        "Form %s attachments: %s",
        root.designation, [f.designation for f in attached],
    )
    return attached


def filed_forms(root: Form) -> list[Form]:
    """The root form followed by its attachments."""
    return [root, *resolve_attachments(root)]


def summarize(f1040: F1040) -> ReturnSummary:
    """Build the output summary: every filed form with all of its lines."""
    return ReturnSummary(
        tax_year=f1040.tax_year,
        filing_status=f1040.filing_status,
        forms=[
            FormLines(designation=f.designation, sequence=f.sequence, lines=f.fields())
            for f in filed_forms(f1040)
        ],
    )
