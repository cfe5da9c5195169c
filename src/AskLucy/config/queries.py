"""Query domain configuration and clause DSL parsing.

A configured query is a named list of clause definitions:

    queries:
      - NAME: cheap-books
        clauses:
          - {term: quick, field: title, operator: required, boost: 2.5}
          - {phrase: brown fox, proximity: 3}
          - {range: {lower: 10, upper: 20, type: inclusive}, field: price}
          - {group: [{term: red}, {term: blue}], operator: prohibited}

Every definition is built into clause objects while loading, so an invalid
clause fails at config load time with its config key in the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AskLucy.config.common import (
    expect_float,
    expect_int,
    expect_list,
    expect_scalar,
    expect_str,
    get_optional_value,
)
from AskLucy.core.clause import Clause
from AskLucy.core.errors import InvalidArgumentError, InvalidFormatError
from AskLucy.core.modifiers import Operator, RangeType
from AskLucy.core.phrase import Phrase
from AskLucy.core.query import Query
from AskLucy.core.range import Range
from AskLucy.core.term import Term

_QUERY_KEYS = {"NAME", "FIELD", "OPERATOR", "BOOST", "clauses"}
_COMMON_KEYS = {"field", "operator", "boost"}
_KIND_KEYS: dict[str, set[str]] = {
    "term": {"fuzziness"},
    "phrase": {"proximity"},
    "range": set(),
    "group": set(),
}
_RANGE_KEYS = {"lower", "upper", "type"}


@dataclass(frozen=True, slots=True)
class NamedQuery:
    """A configured query and its display name."""

    name: str | None
    query: Query


def load_queries(raw: Mapping[str, Any], *, escape: bool = False) -> tuple[NamedQuery, ...]:
    """Load the ``queries`` list.

    Args:
        raw: Root configuration mapping.
        escape: Whether clause text is escaped when rendered.

    Returns:
        Built queries in configured order.

    Raises:
        TypeError: If config shape/types are invalid.
        ValueError: If keys are missing or clause values are invalid.
    """
    queries_obj = raw.get("queries")
    if queries_obj is None:
        raise ValueError("Missing required config: queries")
    items = expect_list(queries_obj, "queries")
    return tuple(parse_named_query(item, f"queries[{idx}]", escape=escape) for idx, item in enumerate(items))


def check_queries(queries: tuple[NamedQuery, ...]) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If no query is configured or a query has no clauses.
    """
    if not queries:
        raise ValueError("queries must include at least one query")
    for idx, named in enumerate(queries):
        if not len(named.query):
            raise ValueError(f"queries[{idx}].clauses must include at least one clause")


def parse_named_query(value: Any, config_key: str, *, escape: bool = False) -> NamedQuery:
    """Parse one query mapping into a `NamedQuery`.

    Args:
        value: Query mapping value.
        config_key: Full key path used in error messages.
        escape: Whether clause text is escaped when rendered.

    Returns:
        Parsed query.

    Raises:
        TypeError: If query shape/types are invalid.
        ValueError: If query keys or clause values are invalid.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    unknown = {str(k) for k in value.keys()} - _QUERY_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    name = None
    if "NAME" in value:
        name = expect_str(value["NAME"], f"{config_key}.NAME").strip() or None

    query = Query()
    clauses_obj = get_optional_value(value, "clauses", [])
    for idx, item in enumerate(expect_list(clauses_obj, f"{config_key}.clauses")):
        query.add(parse_clause(item, f"{config_key}.clauses[{idx}]", escape=escape))

    group_settings = {"field": value.get("FIELD"), "operator": value.get("OPERATOR"), "boost": value.get("BOOST")}
    try:
        _apply_common(
            query,
            group_settings,
            config_key,
            key_names={"field": "FIELD", "operator": "OPERATOR", "boost": "BOOST"},
        )
    except InvalidArgumentError as e:
        raise ValueError(f"{config_key}: {e}") from e
    return NamedQuery(name=name, query=query)


def parse_clause(value: Any, config_key: str, *, escape: bool = False) -> Clause:
    """Build a clause object from its mapping definition.

    Exactly one of ``term``, ``phrase``, ``range`` or ``group`` selects the
    clause kind.

    Raises:
        TypeError: If the definition shape/types are invalid.
        ValueError: If keys or values are invalid.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    kinds = [kind for kind in _KIND_KEYS if kind in value]
    if len(kinds) != 1:
        raise ValueError(f"{config_key} must define exactly one of {sorted(_KIND_KEYS)}")
    kind = kinds[0]

    allowed = _COMMON_KEYS | _KIND_KEYS[kind] | {kind}
    unknown = {str(k) for k in value.keys()} - allowed
    if unknown:
        raise ValueError(f"{config_key} has unknown keys for {kind}: {sorted(unknown)}")

    try:
        clause = _build_clause(kind, value, config_key, escape=escape)
        _apply_common(clause, value, config_key)
    except (InvalidArgumentError, InvalidFormatError) as e:
        raise ValueError(f"{config_key}: {e}") from e
    return clause


def _build_clause(kind: str, value: Mapping[str, Any], config_key: str, *, escape: bool) -> Clause:
    """Construct the bare clause of the given kind."""
    body = value[kind]
    if kind == "term":
        term = Term(_term_text(body, f"{config_key}.term"), escape=escape)
        if "fuzziness" in value:
            term.fuzzify(expect_int(value["fuzziness"], f"{config_key}.fuzziness"))
        return term
    if kind == "phrase":
        phrase = Phrase(expect_str(body, f"{config_key}.phrase"), escape=escape)
        if "proximity" in value:
            phrase.proximity(expect_int(value["proximity"], f"{config_key}.proximity"))
        return phrase
    if kind == "range":
        return _build_range(body, f"{config_key}.range", escape=escape)

    group = Query()
    for idx, item in enumerate(expect_list(body, f"{config_key}.group")):
        group.add(parse_clause(item, f"{config_key}.group[{idx}]", escape=escape))
    return group


def _build_range(value: Any, config_key: str, *, escape: bool) -> Range:
    """Construct a range from ``{lower, upper, type}``."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object with lower/upper/type")
    unknown = {str(k) for k in value.keys()} - _RANGE_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    lower = value.get("lower")
    upper = value.get("upper")
    return Range(
        expect_scalar(lower, f"{config_key}.lower") if lower is not None else None,
        expect_scalar(upper, f"{config_key}.upper") if upper is not None else None,
        range_type=expect_str(get_optional_value(value, "type", RangeType.INCLUSIVE), f"{config_key}.type"),
        escape=escape,
    )


def _apply_common(
    clause: Clause,
    value: Mapping[str, Any],
    config_key: str,
    *,
    key_names: Mapping[str, str] | None = None,
) -> None:
    """Apply field/operator/boost settings shared by all clause kinds."""
    names = key_names or {"field": "field", "operator": "operator", "boost": "boost"}

    field = value.get("field")
    if field is not None:
        clause.set_field(expect_str(field, f"{config_key}.{names['field']}").strip())

    operator = value.get("operator")
    if operator is not None:
        resolved = Operator.from_name(expect_str(operator, f"{config_key}.{names['operator']}"))
        if resolved is Operator.REQUIRED:
            clause.required()
        elif resolved is Operator.PROHIBITED:
            clause.prohibited()
        else:
            clause.optional()

    boost = value.get("boost")
    if boost is not None:
        clause.boost(expect_float(boost, f"{config_key}.{names['boost']}"))


def _term_text(value: Any, config_key: str) -> str:
    """Accept a term given as a string or a bare YAML number."""
    return str(expect_scalar(value, config_key))
