from typing import Dict, List, Sequence

import jinja2

from rootanchors.document import DSRecord, to_rrset


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.PackageLoader("rootanchors", "templates"),
        autoescape=jinja2.select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_text(records: Sequence[DSRecord]) -> str:
    """Render DS records in zone file format, one RRset per owner name"""
    by_owner: Dict[str, List[DSRecord]] = {}
    for record in records:
        by_owner.setdefault(record.owner_name, []).append(record)
    return "".join(
        to_rrset(owner_records).to_text() + "\n"
        for owner_records in by_owner.values()
    )


def render_bind(records: Sequence[DSRecord]) -> str:
    template = _environment().get_template("bind.j2")
    return template.render(records=records)


def render_unbound(records: Sequence[DSRecord]) -> str:
    template = _environment().get_template("unbound.j2")
    return template.render(records=records)


RENDERERS = {
    "text": render_text,
    "bind": render_bind,
    "unbound": render_unbound,
}


def render(records: Sequence[DSRecord], fmt: str) -> str:
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt}")
    return renderer(records)
