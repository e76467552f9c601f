"""Field type inference.

Maps a bare field name to a semantic type with an ordered keyword
heuristic. Rules are tested top to bottom against the lower-cased leaf
name and the first rule with a matching substring wins.

The order is load-bearing and some outcomes are non-obvious:
- ``createdDate`` is a date (rule 3) before any other rule is tried.
- ``isActive`` is a boolean (rule 5), no number keyword matches it.
- ``id`` is a number (rule 4), not an identifier type. Any name
  containing ``id`` (``userId``, ``valid``) is treated the same way.
"""

from formsynth.strategies.template_engine.models import FieldType

TYPE_RULES: tuple[tuple[FieldType, tuple[str, ...]], ...] = (
    (FieldType.EMAIL, ("email", "mail")),
    (FieldType.PHONE, ("phone", "tel", "mobile")),
    (FieldType.DATE, ("date", "time", "created", "updated", "birth", "due")),
    (
        FieldType.NUMBER,
        ("amount", "price", "cost", "total", "count", "quantity", "age", "number", "id"),
    ),
    (FieldType.BOOLEAN, ("is", "has", "active", "enabled", "visible", "required")),
    (FieldType.URL, ("url", "link", "website")),
)


def infer_field_type(name: str) -> str:
    """Infer the semantic type of a field from its leaf name.

    Args:
        name: The field's leaf identifier (no dotted path).

    Returns:
        One of the FieldType values, ``"text"`` when no rule matches.
    """
    lowered = name.lower()
    for field_type, keywords in TYPE_RULES:
        if any(keyword in lowered for keyword in keywords):
            return field_type.value
    return FieldType.TEXT.value
