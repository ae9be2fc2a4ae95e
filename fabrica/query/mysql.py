from fabrica.core.interfaces.query import Query
from fabrica.query import register_dialect
from fabrica.query.builder import QueryBuilder
from fabrica.query.values import QuerySpec, WhereValue


def quote_identifier(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def quote_literal(value: WhereValue) -> str:
    if not value.is_text:
        return str(value.value)
    escaped = value.value.replace("\\", "\\\\").replace("'", "''")
    return f"'{escaped}'"


class MySqlQuery(Query):
    dialect = "mysql"

    def __init__(self, spec: QuerySpec):
        self._spec = spec

    @property
    def spec(self) -> QuerySpec:
        return self._spec

    def render(self) -> str:
        spec = self._spec
        columns = ", ".join(quote_identifier(c) for c in spec.columns) or "*"
        parts = [f"SELECT {columns} FROM {quote_identifier(spec.table)}"]
        if spec.predicate is not None:
            pred = spec.predicate
            parts.append(f"WHERE {quote_identifier(pred.column)} {pred.operator} {quote_literal(pred.value)}")
        if spec.order_by:
            ordering = ", ".join(
                f"{quote_identifier(o.column)} {'DESC' if o.descending else 'ASC'}" for o in spec.order_by
            )
            parts.append(f"ORDER BY {ordering}")
        if spec.limit is not None:
            parts.append(f"LIMIT {spec.limit}")
        return " ".join(parts) + ";"

    def __eq__(self, other):
        return isinstance(other, MySqlQuery) and other._spec == self._spec

    def __hash__(self):
        return hash((self.dialect, self._spec))

    def __repr__(self):
        return f"MySqlQuery({self._spec!r})"


@register_dialect("mysql")
def _build_mysql_builder(**kwargs):
    return QueryBuilder("mysql", MySqlQuery, **kwargs)
