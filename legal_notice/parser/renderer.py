"""Canonical text rendering of attribution records.

Renders parsed records back into one normalised notice line per record, using
a small Jinja2 template.  Re-parsing the rendered text yields the same records,
which makes the output handy for edit notes and for regression checks.
"""

from __future__ import annotations

from collections.abc import Iterable

from jinja2 import Environment

from .models import AttributionRecord, AttributionType


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

_NOTICE_TEMPLATE = """\
{% for record in records %}
{% if record.symbols %}
{{ record.symbols | join(" & ") }}{% if record.years %} {{ record.years | join(", ") }}{% endif %} {{ record.name }}
{% endif %}
{% if record.relation %}
{{ record.relation }}{% if record.years %} {{ record.years | join(" & ") }}{% endif %} {{ record.name }}
{% endif %}
{% endfor %}
"""

_RELATION_PHRASES: dict[tuple[AttributionType, ...], str] = {
    (AttributionType.MARKETED_BY, AttributionType.DISTRIBUTED_BY): "marketed and distributed by",
    (AttributionType.DISTRIBUTED_BY, AttributionType.MARKETED_BY): "distributed and marketed by",
}


def _environment() -> Environment:
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _relation_phrase(types: list[AttributionType]) -> str:
    relations = tuple(t for t in types if not t.is_rights_symbol)
    if not relations:
        return ""
    if relations in _RELATION_PHRASES:
        return _RELATION_PHRASES[relations]
    return " and ".join(t.value for t in relations)


def _context(record: AttributionRecord) -> dict[str, object]:
    return {
        "name": record.name,
        "symbols": [t.value for t in record.types if t.is_rights_symbol],
        "years": record.years,
        "relation": _relation_phrase(record.types),
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render_notice(records: Iterable[AttributionRecord]) -> str:
    """Render records as canonical notice text, one line per record.

    Examples::

        ℗ & © 2014, 2017 Round Hill Records
        marketed and distributed by Parlophone Records Ltd.
        licensed to 2019 & 2020 Foo Records
    """
    template = _environment().from_string(_NOTICE_TEMPLATE)
    rendered = template.render(records=[_context(record) for record in records])
    return rendered.rstrip("\n")
